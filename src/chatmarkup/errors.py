"""Exception classes for chatmarkup.

Malformed markup is never an error: unterminated delimiters, unknown
mentions and non-whitelisted emoji all degrade to plain text. The only
exceptions raised are for inputs of the wrong type.
"""

from __future__ import annotations


class ChatMarkupError(Exception):
    """Base exception for all chatmarkup errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidInputError(ChatMarkupError, TypeError):
    """Raised when a message to parse is not a string.

    Also a TypeError, so callers that only care about the type mismatch
    can catch that instead.
    """

    def __init__(self, value: object) -> None:
        """Initialize with the offending value.

        Args:
            value: Whatever was passed in place of the message string
        """
        self.value = value
        super().__init__(f"Expected a string, got {type(value).__name__}")


class SerializationError(ChatMarkupError, ValueError):
    """Raised when serialized node data cannot be turned back into nodes."""

    pass
