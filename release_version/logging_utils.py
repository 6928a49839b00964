"""Helper utilities for the package's logging hierarchy."""

from __future__ import annotations

import logging
import os
from typing import Optional

BASE_LOGGER_NAME = "release_version"
LOG_LEVEL_ENV = "RELEASE_VERSION_LOG_LEVEL"

BASE_LOGGER = logging.getLogger(BASE_LOGGER_NAME)
BASE_LOGGER.propagate = True


def coerce_log_level(value: object) -> Optional[int]:
    """Turn ``20``, ``"20"`` or ``"info"`` into a logging level, or None if unusable."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        candidate = value.strip()
        if not candidate:
            return None
        if candidate.isdigit():
            return int(candidate)
        return logging._nameToLevel.get(candidate.upper())  # type: ignore[attr-defined]
    return None


def get_logger(suffix: str | None = None) -> logging.Logger:
    """Return the shared package logger or one of its children."""

    if suffix is None:
        return BASE_LOGGER
    logger = BASE_LOGGER.getChild(suffix)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    return logger


def set_log_level(level: int) -> None:
    """Update the base logger level (and implicitly its children)."""

    BASE_LOGGER.setLevel(level)


def configure_from_environment() -> Optional[int]:
    """Apply ``RELEASE_VERSION_LOG_LEVEL`` if it is set to a usable level."""

    level = coerce_log_level(os.environ.get(LOG_LEVEL_ENV))
    if level is not None:
        set_log_level(level)
    return level


configure_from_environment()


__all__ = [
    "BASE_LOGGER",
    "LOG_LEVEL_ENV",
    "coerce_log_level",
    "configure_from_environment",
    "get_logger",
    "set_log_level",
]
