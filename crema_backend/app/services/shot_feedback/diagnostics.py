# crema_backend/app/services/shot_feedback/diagnostics.py
from __future__ import annotations
from typing import Optional

from crema_backend.app.models.shot import AdvancedShotMetrics, ShotSummary
from crema_backend.app.utils.numbers import is_given

# Purpose:
# Extra sentence for shots that fell through the extraction × strength grid,
# read off pressure / first-drip / channeling data when the machine has it.
# First match wins; a missing operand just means that rule does not fire.

CHOKING_PRESSURE_BAR = 10.0
EARLY_DRIP_FRACTION = 0.1

CHOKING_DETAIL = (
    "High pressure and long shot time suggest the puck may be choking. "
    "Try a coarser grind or slightly lower dose."
)
EARLY_DRIP_DETAIL = "Very early first drips can point to a coarse grind or uneven puck prep."
CHANNELING_DETAIL = "Channeling suspected. Focus on distribution and tamping before changing grind."


def _is_choking(advanced: AdvancedShotMetrics, shot: ShotSummary, tol_time: float) -> bool:
    if not (is_given(advanced.peak_pressure_bar) and advanced.peak_pressure_bar > CHOKING_PRESSURE_BAR):
        return False
    if not (is_given(shot.target_time_s) and is_given(shot.actual_time_s)):
        return False
    return shot.actual_time_s > shot.target_time_s * (1 + tol_time)


def _is_early_drip(advanced: AdvancedShotMetrics, shot: ShotSummary) -> bool:
    if not (is_given(advanced.time_to_first_drip_s) and is_given(shot.target_time_s)):
        return False
    return advanced.time_to_first_drip_s < shot.target_time_s * EARLY_DRIP_FRACTION


def build_advanced_detail(
    advanced: Optional[AdvancedShotMetrics],
    shot: ShotSummary,
    tol_time: float,
) -> Optional[str]:
    if advanced is None:
        return None
    if _is_choking(advanced, shot, tol_time):
        return CHOKING_DETAIL
    if _is_early_drip(advanced, shot):
        return EARLY_DRIP_DETAIL
    if advanced.suspected_channeling:
        return CHANNELING_DETAIL
    return None
