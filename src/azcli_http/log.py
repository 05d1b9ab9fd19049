"""Logging setup shared by the CLI entry points."""

from __future__ import annotations

import logging
import os
from typing import Final

LOG_LEVEL_ENV: Final[str] = "AZHTTP_LOG_LEVEL"
PACKAGE_LOGGER: Final[str] = "azcli_http"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Configure the package logger.

    ``level`` wins over ``AZHTTP_LOG_LEVEL``; the fallback is ``WARNING``.
    Repeated calls only adjust the level.
    """

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s - %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


__all__ = ["LOG_LEVEL_ENV", "configure_logging"]
