"""Logging setup for path_helper."""

import sys

from py_app_dev.core.logging import logger

DEFAULT_LOG_LEVEL = "WARNING"


def setup_logger(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Replace the logger's default handler with a single standard-error sink."""
    logger.remove()
    logger.add(sys.stderr, format="path_helper: {message}", level=level.upper())
