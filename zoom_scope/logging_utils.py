from __future__ import annotations

import logging
import os
from typing import Optional, Tuple

LOGGER_NAME = "ChartZoom.Scope"
LOG_LEVEL_ENV_VAR = "ZOOM_SCOPE_LOG_LEVEL"


def get_logger(suffix: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child of it when suffix is given."""
    if suffix:
        return logging.getLogger(f"{LOGGER_NAME}.{suffix}")
    return logging.getLogger(LOGGER_NAME)


def resolve_log_level(debug_enabled: bool) -> int:
    return logging.DEBUG if debug_enabled else logging.INFO


def resolve_log_level_hint() -> Tuple[Optional[int], Optional[str]]:
    """
    Read a log level hint from the environment.

    Accepts either a numeric level ("10") or a level name ("debug"). Returns
    (None, None) when the variable is unset or unparseable.
    """
    raw = os.environ.get(LOG_LEVEL_ENV_VAR)
    if raw is None:
        return None, None
    token = raw.strip()
    if not token:
        return None, None
    try:
        value = int(token)
    except ValueError:
        resolved = logging.getLevelName(token.upper())
        if isinstance(resolved, int):
            return resolved, token.upper()
        return None, None
    return value, logging.getLevelName(value)
