# crema_backend/app/services/shot_feedback/history.py
from __future__ import annotations
from typing import Optional

from crema_backend.app.models.shot import RoastLevel, ShotSummary
from crema_backend.app.models.shot_history import ShotHistoryRecord, ShotNotes
from crema_backend.app.utils.logs import get_logger
from crema_backend.app.utils.numbers import is_given, parse_ratio
from crema_backend.app.utils.strings import norm_label

# Purpose:
# Adapt a logged shot (+ the user's notes on it) into the ShotSummary the
# feedback engine reads. History records carry no target time, so the
# extraction axis is always "on target" for shots judged this way.

log = get_logger("crema.shot_feedback.history")

_ROASTS = {r.value for r in RoastLevel}

def _roast_from_notes(raw: Optional[str]) -> Optional[RoastLevel]:
    label = norm_label(raw)
    if label is None:
        return None
    if label not in _ROASTS:
        log.debug("ignoring unknown roast label %r in shot notes", raw)
        return None
    return RoastLevel(label)

def shot_history_to_summary(record: ShotHistoryRecord, notes: Optional[ShotNotes] = None) -> ShotSummary:
    notes = notes or ShotNotes()
    volume = record.volume
    has_scale = volume is not None and volume > 0

    return ShotSummary(
        dose_g=notes.dose_in,
        target_yield_g=notes.dose_out,
        actual_yield_g=volume,
        target_time_s=None,
        actual_time_s=record.duration / 1000 if is_given(record.duration) else None,
        target_ratio=parse_ratio(notes.ratio),
        has_scale=has_scale,
        roast_level=_roast_from_notes(notes.roast_level),
    )
