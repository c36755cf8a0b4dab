# crema_backend/app/models/shot.py
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from crema_backend.app.utils.strings import norm_label


# ===================== Enums =====================

class RoastLevel(str, Enum):
    LIGHT = "light"
    MEDIUM = "medium"
    DARK = "dark"

class Severity(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"


# ===================== Inputs =====================

# Field aliases keep the camelCase names the web UI already sends
# ("targetYield_g", "hasScale", ...); snake_case works too.
_INPUT_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class ShotSummary(BaseModel):
    """
    One shot as the caller sees it: measured yield/time plus the targets it
    was pulled against. Every numeric field is optional; zero and NaN read as
    "not measured" in the engine.
    """
    dose_g: Optional[float] = None
    target_yield_g: Optional[float] = Field(default=None, alias="targetYield_g")
    actual_yield_g: Optional[float] = Field(default=None, alias="actualYield_g")
    target_time_s: Optional[float] = Field(default=None, alias="targetTime_s")
    actual_time_s: Optional[float] = Field(default=None, alias="actualTime_s")
    target_ratio: Optional[float] = Field(default=None, alias="targetRatio")  # yield / dose
    has_scale: bool = Field(alias="hasScale")  # yield reading is trustworthy
    roast_level: Optional[RoastLevel] = Field(default=None, alias="roastLevel")

    model_config = _INPUT_CONFIG

    @field_validator("roast_level", mode="before")
    @classmethod
    def _lower_roast(cls, v: Any) -> Any:
        if isinstance(v, str):
            return norm_label(v)
        return v


class AdvancedShotMetrics(BaseModel):
    peak_pressure_bar: Optional[float] = Field(default=None, alias="peakPressure_bar")
    time_to_first_drip_s: Optional[float] = Field(default=None, alias="timeToFirstDrip_s")
    suspected_channeling: Optional[bool] = Field(default=None, alias="suspectedChanneling")

    model_config = _INPUT_CONFIG


class FeedbackOptions(BaseModel):
    roast_type_tips: bool = Field(default=False, alias="roastTypeTips")  # per-shot toggle

    model_config = _INPUT_CONFIG


# ===================== Output =====================

class ShotFeedback(BaseModel):
    message: str                                  # main suggestion
    extraction: Optional[str] = None              # e.g. "Likely under-extracted"
    strength: Optional[str] = None                # e.g. "Watery / low strength"
    detail: Optional[str] = None                  # extra nuance from advanced metrics
    roast_note: Optional[str] = Field(default=None, alias="roastNote")
    severity: Severity
    taste_note: str = Field(alias="tasteNote")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_public(self) -> Dict[str, Any]:
        """Wire shape for the UI: camelCase keys, absent optionals dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = [
    "RoastLevel",
    "Severity",
    "ShotSummary",
    "AdvancedShotMetrics",
    "FeedbackOptions",
    "ShotFeedback",
]
