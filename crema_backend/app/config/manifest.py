# crema_backend/app/config/manifest.py
from __future__ import annotations

import os
from typing import List

# ---- env hygiene ----
def _clean_env(value: str | None) -> str | None:
    if value is None:
        return None
    v = value.strip().strip('"').strip("'")
    return v or None

def _env_flag(name: str, default: bool) -> bool:
    raw = _clean_env(os.getenv(name))
    if raw is None:
        return default
    return raw.lower() not in ("0", "false", "no", "off")

def _env_list(name: str, default: List[str]) -> List[str]:
    raw = _clean_env(os.getenv(name))
    if not raw:
        return list(default)
    return [p.strip() for p in raw.split(",") if p.strip()]

# ---- environment mode ----
APP_ENV: str = _clean_env(os.getenv("APP_ENV")) or "development"
DEBUG_MODE: bool = _env_flag("DEBUG", False)
LOG_LEVEL: str = (_clean_env(os.getenv("CREMA_LOG_LEVEL")) or ("DEBUG" if DEBUG_MODE else "INFO")).upper()

# ---- HTTP surface ----
# Vite dev server by default
CORS_ORIGINS: List[str] = _env_list(
    "CREMA_CORS_ORIGINS",
    ["http://localhost:5173", "http://127.0.0.1:5173"],
)

# ---- shot feedback ----
# Global "Show Shot Feedback" preference used when a caller sends none.
SHOW_SHOT_FEEDBACK_DEFAULT: bool = _env_flag("SHOW_SHOT_FEEDBACK_DEFAULT", True)


__all__ = [
    "APP_ENV",
    "DEBUG_MODE",
    "LOG_LEVEL",
    "CORS_ORIGINS",
    "SHOW_SHOT_FEEDBACK_DEFAULT",
]
