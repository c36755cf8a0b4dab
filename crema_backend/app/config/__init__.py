# crema_backend/app/config/__init__.py
from __future__ import annotations

# Re-export config surface expected by callers across the app.

# Env settings live in manifest.py
from .manifest import (
    APP_ENV,
    DEBUG_MODE,
    LOG_LEVEL,
    CORS_ORIGINS,
    SHOW_SHOT_FEEDBACK_DEFAULT,
)

__all__ = [
    "APP_ENV",
    "DEBUG_MODE",
    "LOG_LEVEL",
    "CORS_ORIGINS",
    "SHOW_SHOT_FEEDBACK_DEFAULT",
]
