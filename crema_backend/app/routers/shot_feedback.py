# crema_backend/app/routers/shot_feedback.py
from __future__ import annotations
from fastapi import APIRouter, HTTPException, status

from crema_backend.app.models.shot import RoastLevel
from crema_backend.app.schemas import HistoryFeedbackRequest, ShotFeedbackRequest
from crema_backend.app.services.router_helpers import shot_feedback_helpers as H
from crema_backend.app.services.shot_feedback import roast_aware_params, shot_history_to_summary
from crema_backend.app.utils.logs import get_logger

router = APIRouter(prefix="/shot-feedback", tags=["shot-feedback"])

log = get_logger("crema.routers.shot_feedback")

# -----------------------------------------------------------------------------
# POST /api/shot-feedback
# Body: { shot: {...}, advanced?: {...}, options?: {...}, preferences?: {...} }
# "feedback": null is a normal answer (no scale / yield / dose on the shot).
# -----------------------------------------------------------------------------
@router.post("", response_model=dict)
def shot_feedback(payload: ShotFeedbackRequest, explain: bool = False):
    try:
        return H.render_feedback(
            payload.shot,
            advanced=payload.advanced,
            options=payload.options,
            preferences=payload.preferences,
            explain=explain,
        )
    except Exception as e:
        log.exception("shot feedback failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"shot feedback failed: {e}")

# -----------------------------------------------------------------------------
# POST /api/shot-feedback/from-history
# Body: { record: {volume, duration(ms), ...}, notes?: {doseIn, doseOut, ratio, roastLevel}, ... }
# Adapts the logged shot first and echoes the derived summary.
# -----------------------------------------------------------------------------
@router.post("/from-history", response_model=dict)
def shot_feedback_from_history(payload: HistoryFeedbackRequest, explain: bool = False):
    try:
        summary = shot_history_to_summary(payload.record, payload.notes)
        res = H.render_feedback(
            summary,
            advanced=payload.advanced,
            options=payload.options,
            preferences=payload.preferences,
            explain=explain,
        )
        res["summary"] = summary.model_dump(mode="json", by_alias=True, exclude_none=True)
        return res
    except Exception as e:
        log.exception("shot feedback from history failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"shot feedback failed: {e}")

# -----------------------------------------------------------------------------
# GET /api/shot-feedback/roast-params/{roast}
# roast: light | medium | dark | default
# -----------------------------------------------------------------------------
@router.get("/roast-params/{roast}", response_model=dict)
def roast_params(roast: str):
    key = (roast or "").strip().lower()
    if key == "default":
        params = roast_aware_params(None)
    else:
        try:
            params = roast_aware_params(RoastLevel(key))
        except ValueError:
            raise HTTPException(status_code=404, detail=f"unknown roast level: {roast}")
    return {
        "roast": key,
        "tol_time": params.tol_time,
        "tol_ratio": params.tol_ratio,
        "roast_note": params.roast_note,
    }
