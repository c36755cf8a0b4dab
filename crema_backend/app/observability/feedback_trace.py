# crema_backend/app/observability/feedback_trace.py
from __future__ import annotations

import time
import uuid
from typing import Any, Dict, List, Optional


class FeedbackTrace:
    """
    Lightweight, structured trace of how a shot's feedback was produced:
    the guard, the tolerances in force, both axes and the grid cell chosen.
    Safe to return in API responses (inputs are the caller's own numbers).
    """
    def __init__(self, request_id: Optional[str] = None) -> None:
        self._t0 = time.time()
        self.request_id = request_id or f"shot-{int(self._t0*1000)}-{uuid.uuid4().hex[:6]}"
        self.meta: Dict[str, Any] = {}
        self.steps: List[Dict[str, Any]] = []
        self.outputs: Dict[str, Any] = {}

    # -------- meta --------
    def set_meta(self, **kwargs: Any) -> None:
        self.meta.update(kwargs)

    # -------- narrative steps (free-form) --------
    def add_step(self, label: str, **detail: Any) -> None:
        self.steps.append({"t": time.time(), "label": label, **detail})

    # -------- final outputs snapshot --------
    def set_outputs(self, **kwargs: Any) -> None:
        self.outputs.update(kwargs)

    # -------- export --------
    def to_public(self) -> Dict[str, Any]:
        return {
            "request_id": self.request_id,
            "elapsed_ms": int((time.time() - self._t0) * 1000),
            "meta": self.meta,
            "steps": self.steps,
            "outputs": self.outputs,
        }
