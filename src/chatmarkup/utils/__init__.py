"""Shared utilities for chatmarkup.

- logger: get_logger for logging
"""

from chatmarkup.utils.logger import get_logger

__all__ = [
    "get_logger",
]
