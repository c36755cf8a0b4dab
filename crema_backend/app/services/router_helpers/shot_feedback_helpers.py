# crema_backend/app/services/router_helpers/shot_feedback_helpers.py
from __future__ import annotations
from typing import Any, Dict, Optional

from crema_backend.app.models.shot import (
    AdvancedShotMetrics,
    FeedbackOptions,
    Severity,
    ShotSummary,
)
from crema_backend.app.observability.feedback_trace import FeedbackTrace
from crema_backend.app.schemas import UserPreferences
from crema_backend.app.services.shot_feedback import ShotAssessment, assess_shot, feedback_from_assessment
from crema_backend.app.services.shot_feedback.engine import verdict_for

_ALERT_CLASS = {
    Severity.SUCCESS: "alert-success",
    Severity.WARNING: "alert-warning",
}

def alert_class_for(severity: Optional[Severity]) -> str:
    """UI accent for a severity; anything unknown renders as info."""
    return _ALERT_CLASS.get(severity, "alert-info")

def _trace_for(shot: ShotSummary, a: Optional[ShotAssessment], trace: FeedbackTrace) -> None:
    trace.add_step("guard", passed=a is not None)
    if a is None:
        return
    trace.set_meta(
        roast_aware=a.roast_aware,
        roast_level=shot.roast_level.value if shot.roast_level else None,
        tol_time=a.tol_time,
        tol_ratio=a.tol_ratio,
    )
    trace.add_step(
        "ratios",
        actual_ratio=a.actual_ratio,
        target_ratio=a.target_ratio,
        time_diff_rel=a.time_diff_rel,
        ratio_diff_rel=a.ratio_diff_rel,
    )
    trace.add_step(
        "axes",
        within_time=a.within_time,
        within_ratio=a.within_ratio,
        extraction_level=a.extraction_level,
        strength_level=a.strength_level,
    )
    trace.add_step("verdict", cell=list(a.cell), severity=verdict_for(a).severity.value)

def render_feedback(
    shot: ShotSummary,
    advanced: Optional[AdvancedShotMetrics] = None,
    options: Optional[FeedbackOptions] = None,
    preferences: Optional[UserPreferences] = None,
    explain: bool = False,
) -> Dict[str, Any]:
    """
    Returns:
      {
        "ok": True,
        "enabled": bool,            # "Show Shot Feedback" preference
        "feedback": {...} | None,   # None -> do not render a card
        "accent": "alert-..." | None,
        "trace": {...}              # only when explain=True
      }
    """
    prefs = preferences or UserPreferences()
    out: Dict[str, Any] = {"ok": True, "enabled": prefs.show_shot_feedback, "feedback": None, "accent": None}

    trace = FeedbackTrace() if explain else None
    if trace is not None:
        trace.set_meta(enabled=prefs.show_shot_feedback)

    if not prefs.show_shot_feedback:
        if trace is not None:
            out["trace"] = trace.to_public()
        return out

    # one assessment feeds both the feedback and the trace
    a = assess_shot(shot, options)
    fb = feedback_from_assessment(a, shot, advanced) if a is not None else None
    if fb is not None:
        out["feedback"] = fb.to_public()
        out["accent"] = alert_class_for(fb.severity)

    if trace is not None:
        _trace_for(shot, a, trace)
        trace.set_outputs(feedback=out["feedback"], accent=out["accent"])
        out["trace"] = trace.to_public()
    return out
