# crema_backend/app/services/shot_feedback/__init__.py
from .engine import TASTE_NOTE, ShotAssessment, assess_shot, feedback_from_assessment, get_shot_feedback
from .history import shot_history_to_summary
from .roast import RoastParams, roast_aware_params

__all__ = [
    "TASTE_NOTE",
    "ShotAssessment",
    "assess_shot",
    "feedback_from_assessment",
    "get_shot_feedback",
    "shot_history_to_summary",
    "RoastParams",
    "roast_aware_params",
]
