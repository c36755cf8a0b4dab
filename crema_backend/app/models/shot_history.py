# crema_backend/app/models/shot_history.py
from __future__ import annotations

from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class ShotHistoryRecord(BaseModel):
    """A stored shot as the machine logged it. Only volume and duration are read."""
    id: Optional[Union[str, int]] = None
    volume: Optional[float] = None        # grams in the cup, from the scale
    duration: Optional[float] = None      # milliseconds

    # be permissive with extra keys so older firmware records don't break
    model_config = ConfigDict(extra="allow", frozen=True)


class ShotNotes(BaseModel):
    """User-entered notes attached to a history record."""
    dose_in: Optional[float] = Field(default=None, alias="doseIn")
    dose_out: Optional[float] = Field(default=None, alias="doseOut")
    ratio: Optional[Union[float, str]] = None      # 2.0 or "1:2"
    roast_level: Optional[str] = Field(default=None, alias="roastLevel")
    notes: Optional[Any] = None

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)


__all__ = ["ShotHistoryRecord", "ShotNotes"]
