"""Logging setup."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def setup_logging(level: str = "WARNING", logger_name: str = "wirebox") -> logging.Logger:
    """Send the package logger to stdout at ``level``."""
    lvl = getattr(logging, level.upper(), logging.WARNING)
    if not isinstance(lvl, int):
        lvl = logging.WARNING
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger = logging.getLogger(logger_name)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(lvl)
    return logger
