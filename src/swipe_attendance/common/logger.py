"""Logger helper.

All package loggers hang off the ``swipe_attendance`` logger, which owns the single
console handler.
"""

from __future__ import annotations

import logging
import sys

_ROOT_NAME = "swipe_attendance"
_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _ensure_root_handler() -> logging.Logger:
    root = logging.getLogger(_ROOT_NAME)

    # Avoid adding handlers multiple times
    if root.handlers:
        return root

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
    root.addHandler(handler)
    root.setLevel(logging.INFO)
    return root


def get_logger(name: str) -> logging.Logger:
    """Get a logger (typically ``__name__``) attached to the package handler."""
    _ensure_root_handler()
    return logging.getLogger(name)


def configure_level(level: str | int) -> None:
    """Apply LOG_LEVEL from settings to the package logger tree."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.INFO
    _ensure_root_handler().setLevel(level)
