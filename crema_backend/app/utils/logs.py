# crema_backend/app/utils/logs.py
from __future__ import annotations

import logging

from crema_backend.app.config import LOG_LEVEL

# All app loggers hang off "crema"; the handler is attached once to that parent
# and children propagate to it.
ROOT_LOGGER_NAME = "crema"

def get_logger(name: str) -> logging.Logger:
    parent = logging.getLogger(ROOT_LOGGER_NAME)
    if not parent.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        parent.addHandler(handler)
        parent.setLevel(LOG_LEVEL)
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
