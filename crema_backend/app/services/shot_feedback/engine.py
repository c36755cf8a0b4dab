# crema_backend/app/services/shot_feedback/engine.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from crema_backend.app.models.shot import (
    AdvancedShotMetrics,
    FeedbackOptions,
    Severity,
    ShotFeedback,
    ShotSummary,
)
from crema_backend.app.utils.logs import get_logger
from crema_backend.app.utils.numbers import is_given
from .diagnostics import build_advanced_detail
from .roast import roast_aware_params

# Purpose:
# Turn one espresso shot into a short diagnosis + a corrective action.
# Two independent axes are read off the shot:
#   - extraction (time vs target):  -1 fast / under, 0 on target, +1 slow / over
#   - strength   (ratio vs target): -1 watery,       0 on target, +1 strong
# and the (extraction, strength) cell picks the message from GRID.
# Pure and stateless: no I/O, same input -> equal output.

log = get_logger("crema.shot_feedback")

TASTE_NOTE = "Ultimately, it's down to taste – enjoy ☕️"

Cell = Tuple[int, int]  # (extraction_level, strength_level)


# --------- Assessment ----------

@dataclass(frozen=True)
class ShotAssessment:
    """Everything the decision table looks at, kept for tracing and tests."""
    tol_time: float
    tol_ratio: float
    roast_aware: bool
    roast_note: Optional[str]
    actual_ratio: float
    target_ratio: Optional[float]
    time_diff_rel: float
    ratio_diff_rel: float
    within_time: bool
    within_ratio: bool
    extraction_level: int
    strength_level: int

    @property
    def cell(self) -> Cell:
        return (self.extraction_level, self.strength_level)

    @property
    def on_target(self) -> bool:
        return self.within_time and self.within_ratio


def assess_shot(shot: ShotSummary, options: Optional[FeedbackOptions] = None) -> Optional[ShotAssessment]:
    """
    Classify a shot on both axes. Returns None when there is not enough data
    (no scale, no yield or no dose); that is the only "failure" and not an error.
    """
    if not shot.has_scale or not is_given(shot.actual_yield_g) or not is_given(shot.dose_g):
        return None

    roast_aware = bool(options and options.roast_type_tips and shot.roast_level)
    tol_time, tol_ratio, roast_note = roast_aware_params(shot.roast_level if roast_aware else None)

    actual_ratio = shot.actual_yield_g / shot.dose_g
    target_ratio = shot.target_ratio
    if target_ratio is None and is_given(shot.target_yield_g):
        target_ratio = shot.target_yield_g / shot.dose_g

    has_target_time = is_given(shot.target_time_s)
    has_target_ratio = is_given(target_ratio)

    time_diff_rel = 0.0
    if has_target_time and is_given(shot.actual_time_s):
        time_diff_rel = (shot.actual_time_s - shot.target_time_s) / shot.target_time_s

    ratio_diff_rel = 0.0
    if has_target_ratio and is_given(actual_ratio):
        ratio_diff_rel = (actual_ratio - target_ratio) / target_ratio

    # inclusive bands; a missing target counts as on target
    within_time = not has_target_time or abs(time_diff_rel) <= tol_time
    within_ratio = not has_target_ratio or abs(ratio_diff_rel) <= tol_ratio

    extraction_level = 0
    if not within_time:
        extraction_level = -1 if time_diff_rel < 0 else 1   # fast vs slow

    strength_level = 0
    if not within_ratio:
        strength_level = -1 if ratio_diff_rel > 0 else 1    # higher ratio = more watery

    return ShotAssessment(
        tol_time=tol_time,
        tol_ratio=tol_ratio,
        roast_aware=roast_aware,
        roast_note=roast_note if roast_aware else None,
        actual_ratio=actual_ratio,
        target_ratio=target_ratio,
        time_diff_rel=time_diff_rel,
        ratio_diff_rel=ratio_diff_rel,
        within_time=within_time,
        within_ratio=within_ratio,
        extraction_level=extraction_level,
        strength_level=strength_level,
    )


# --------- Generic axis texts ----------

def extraction_text(level: int) -> str:
    if level == -1:
        return "Likely under-extracted (fast shot)."
    if level == 1:
        return "Likely over-extracted (long shot)."
    return "Extraction is close to target."

def strength_text(level: int) -> str:
    if level == -1:
        return "On the weaker / more watery side."
    if level == 1:
        return "On the stronger / more concentrated side."
    return "Strength is close to target."


# --------- Decision table ----------

@dataclass(frozen=True)
class Verdict:
    message: str
    severity: Severity
    extraction: Optional[str] = None   # None -> generic extraction_text(level)
    strength: Optional[str] = None     # None -> generic strength_text(level)
    with_detail: bool = False          # attach advanced diagnostics

MATCHED = Verdict(
    message="Shot matched the target recipe. Nice pull!",
    severity=Severity.SUCCESS,
    extraction="Balanced extraction.",
    strength="Balanced strength.",
)

# Time is off but the ratio landed: the grid has no specific advice,
# so fall back to the generic texts + whatever the advanced metrics say.
DEVIATED = Verdict(
    message="Shot deviated from the target. Adjust grind or ratio and try again.",
    severity=Severity.INFO,
    with_detail=True,
)

# All nine cells, keyed by (extraction_level, strength_level).
GRID: Dict[Cell, Verdict] = {
    (0, 0): MATCHED,
    # fast + watery
    (-1, -1): Verdict(
        message="Shot ran fast and high-yield (weak). Try grinding finer and stopping a bit earlier.",
        severity=Severity.WARNING,
        extraction="Often perceived as sour / sharp.",
        strength="On the watery side.",
    ),
    # fast + strong
    (-1, 1): Verdict(
        message="Shot ran fast but quite strong. Try grinding slightly finer or allowing a bit more yield.",
        severity=Severity.INFO,
        extraction="Likely under-extracted.",
        strength="Quite intense.",
    ),
    # slow + strong
    (1, 1): Verdict(
        message="Shot ran slow and low-yield (very strong). Try grinding coarser and letting it run a bit longer.",
        severity=Severity.WARNING,
        extraction="Often perceived as bitter / harsh.",
        strength="Very concentrated.",
    ),
    # slow + watery
    (1, -1): Verdict(
        message=(
            "Shot ran slow but still ended up fairly high-yield. "
            "Try grinding a touch coarser and aiming for a slightly lower yield."
        ),
        severity=Severity.INFO,
        extraction="Leaning over-extracted.",
        strength="A bit thin for the shot time.",
    ),
    # time on target, strength off
    (0, -1): Verdict(
        message="Shot strength is on the weaker side. Try reducing yield slightly or grinding a bit finer.",
        severity=Severity.INFO,
        strength="Watery / low strength.",
    ),
    (0, 1): Verdict(
        message="Shot is quite strong. Try increasing yield a little or grinding a touch coarser.",
        severity=Severity.INFO,
        strength="High strength / muddy.",
    ),
    # strength on target, time off
    (-1, 0): DEVIATED,
    (1, 0): DEVIATED,
}


def verdict_for(assessment: ShotAssessment) -> Verdict:
    if assessment.on_target:
        return MATCHED
    return GRID[assessment.cell]


# --------- Public entry point ----------

def get_shot_feedback(
    shot: ShotSummary,
    advanced: Optional[AdvancedShotMetrics] = None,
    options: Optional[FeedbackOptions] = None,
) -> Optional[ShotFeedback]:
    """
    Feedback for one shot, or None when there is too little data to judge it
    (callers should simply not show a feedback card then).
    """
    a = assess_shot(shot, options)
    if a is None:
        log.debug("no shot feedback: has_scale=%s yield=%s dose=%s",
                  shot.has_scale, shot.actual_yield_g, shot.dose_g)
        return None
    return feedback_from_assessment(a, shot, advanced)


def feedback_from_assessment(
    a: ShotAssessment,
    shot: ShotSummary,
    advanced: Optional[AdvancedShotMetrics] = None,
) -> ShotFeedback:
    """Build the feedback for an already classified shot."""
    v = verdict_for(a)
    log.debug("shot feedback cell=%s severity=%s roast_aware=%s", a.cell, v.severity.value, a.roast_aware)

    detail = build_advanced_detail(advanced, shot, a.tol_time) if v.with_detail else None
    return ShotFeedback(
        message=v.message,
        extraction=v.extraction or extraction_text(a.extraction_level),
        strength=v.strength or strength_text(a.strength_level),
        detail=detail,
        roast_note=a.roast_note,
        severity=v.severity,
        taste_note=TASTE_NOTE,
    )
