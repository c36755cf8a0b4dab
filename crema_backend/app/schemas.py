# schemas.py  (API envelopes for shot feedback)

from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from crema_backend.app.config import SHOW_SHOT_FEEDBACK_DEFAULT
from crema_backend.app.models.shot import (
    AdvancedShotMetrics,
    FeedbackOptions,
    ShotSummary,
)
from crema_backend.app.models.shot_history import ShotHistoryRecord, ShotNotes


# ===================== Preferences =====================

class UserPreferences(BaseModel):
    # Global "Show Shot Feedback" toggle; when off the engine is never called.
    show_shot_feedback: bool = Field(default=SHOW_SHOT_FEEDBACK_DEFAULT, alias="showShotFeedback")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


# ===================== Requests =====================

class ShotFeedbackRequest(BaseModel):
    shot: ShotSummary
    advanced: Optional[AdvancedShotMetrics] = None
    options: Optional[FeedbackOptions] = None
    preferences: Optional[UserPreferences] = None

    model_config = ConfigDict(populate_by_name=True)


class HistoryFeedbackRequest(BaseModel):
    record: ShotHistoryRecord
    notes: Optional[ShotNotes] = None
    advanced: Optional[AdvancedShotMetrics] = None
    options: Optional[FeedbackOptions] = None
    preferences: Optional[UserPreferences] = None

    model_config = ConfigDict(populate_by_name=True)
