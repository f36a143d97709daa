"""Logging utilities for the fx_ptax package."""

from __future__ import annotations

import logging
import os

PACKAGE_LOGGER_NAME = "fx_ptax"
LOG_LEVEL_ENV = "FX_PTAX_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_CONFIGURED = False


def _level_from_env(default: int = logging.WARNING) -> int:
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not raw:
        return default
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else default


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Set the level of the ``fx_ptax`` logger.

    ``level`` falls back to ``$FX_PTAX_LOG_LEVEL`` and then WARNING. Records
    still propagate to the root logger, so host handlers receive them.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if level is None:
        package_logger.setLevel(_level_from_env())
    else:
        package_logger.setLevel(level.upper() if isinstance(level, str) else level)
    return package_logger


def get_logger(name: str = PACKAGE_LOGGER_NAME) -> logging.Logger:
    """Return a module-level logger configured with a simple formatter."""
    global _CONFIGURED
    if not _CONFIGURED:
        logging.basicConfig(format=LOG_FORMAT)
        configure_logging()
        _CONFIGURED = True
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "LOG_LEVEL_ENV", "PACKAGE_LOGGER_NAME"]
