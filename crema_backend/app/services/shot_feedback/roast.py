# crema_backend/app/services/shot_feedback/roast.py
from __future__ import annotations
from typing import Dict, NamedTuple, Optional

from crema_backend.app.models.shot import RoastLevel

# Purpose:
# Roast-aware tolerance bands. Lighter roasts get a wider acceptable deviation
# on both axes, darker roasts a narrower one. Values are relative (0.10 = ±10%).

class RoastParams(NamedTuple):
    tol_time: float
    tol_ratio: float
    roast_note: Optional[str] = None

DEFAULT_PARAMS = RoastParams(tol_time=0.10, tol_ratio=0.10)

ROAST_PARAMS: Dict[RoastLevel, RoastParams] = {
    RoastLevel.LIGHT: RoastParams(
        tol_time=0.15,
        tol_ratio=0.15,
        roast_note="Light roasts often benefit from slightly longer ratios or finer grinds to tame sharp acidity.",
    ),
    RoastLevel.MEDIUM: RoastParams(
        tol_time=0.10,
        tol_ratio=0.10,
        roast_note="Medium roasts are versatile; small grind or yield tweaks usually go a long way.",
    ),
    RoastLevel.DARK: RoastParams(
        tol_time=0.08,
        tol_ratio=0.08,
        roast_note="Dark roasts can over-extract quickly; shorter shots or coarser grinds often taste better.",
    ),
}

# Purpose:
# Tolerances (+ note) for a roast; no roast means the plain ±10% pair and no note.
def roast_aware_params(roast: Optional[RoastLevel]) -> RoastParams:
    if roast is None:
        return DEFAULT_PARAMS
    return ROAST_PARAMS.get(RoastLevel(roast), ROAST_PARAMS[RoastLevel.MEDIUM])
