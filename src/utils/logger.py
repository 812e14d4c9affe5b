"""Centralised Loguru logger shared across the project."""
from __future__ import annotations

import sys

from loguru import logger

_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}"


def configure_logging(level: str = "INFO") -> None:
    """Route log output to stderr at ``level``.

    Entry points call this once after reading the configuration; library code
    only ever imports ``logger``.
    """

    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=_FORMAT)


__all__ = ["configure_logging", "logger"]
