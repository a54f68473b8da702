"""Utility modules for marklex.

Provides:
- logger: get_logger for logging
"""

from marklex.utils.logger import ROOT_LOGGER_NAME, get_logger

__all__ = [
    "ROOT_LOGGER_NAME",
    "get_logger",
]
