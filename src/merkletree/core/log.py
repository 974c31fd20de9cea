"""Package logger setup."""

from __future__ import annotations

import logging
from typing import Optional

from merkletree.core.settings import get_settings

PACKAGE_LOGGER = "merkletree"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Apply a log level to the package logger.

    Handlers are left to the application; only the level is set.

    Args:
        level: Level name; defaults to the configured MERKLETREE_LOG_LEVEL

    Returns:
        The 'merkletree' logger
    """
    if level is None:
        level = get_settings().log_level
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper())
    return logger
