"""Utility modules for wirebox."""

from wirebox.utils.config import Config
from wirebox.utils.logging import setup_logging

__all__ = [
    "Config",
    "setup_logging",
]
