"""Centralized logging configuration.

Usage:
    from staticdoc.utils.log_config import setup_logging
    setup_logging("DEBUG")   # once, at startup
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_HANDLER_NAME = "staticdoc-console"


def _parse_level(value: str | int | None) -> int:
    if isinstance(value, int):
        return value
    level = logging.getLevelName((value or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: str | int | None = "INFO") -> logging.Logger:
    """Attach one console handler to the package logger; safe to call repeatedly."""
    logger = logging.getLogger("staticdoc")
    logger.setLevel(_parse_level(level))

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
