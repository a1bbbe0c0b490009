"""Logging configuration for the cutoff checker.

Only the package logger gets a handler. Modules log through plain
``logging.getLogger(__name__)`` and inherit its level and output.
"""

from __future__ import annotations

import logging
import os
import sys

PACKAGE_LOGGER = "cutoff_checker"


def setup_logger(level: str | None = None) -> logging.Logger:
    """Configure and return the package logger.

    Safe to call more than once: the level is updated on every call, the
    stdout handler is attached only once.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env
            CUTOFF_LOG_LEVEL or INFO.

    Returns:
        The ``cutoff_checker`` logger
    """
    log_level = (level or os.getenv("CUTOFF_LOG_LEVEL", "INFO")).upper()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, log_level, logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    return logger
