"""Minimal logging utilities for chatmarkup.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from chatmarkup.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing message")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "chatmarkup." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'chatmarkup.mymodule'
    """
    if not (name == "chatmarkup" or name.startswith("chatmarkup.")):
        name = f"chatmarkup.{name}"
    return logging.getLogger(name)
