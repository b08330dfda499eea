"""Token and TokenType definitions for the chatmarkup tokenizer.

The tokenizer produces a flat list of Token objects that the tree builder
consumes. Tokens never outlive the parse call that produced them.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the tokenizer."""

    TEXT = auto()

    # Delimited spans
    ITALIC = auto()  # _text_
    BOLD = auto()  # *text*
    CODE = auto()  # `text`
    STRIKE = auto()  # ~text~

    # Leaves
    EMOJI = auto()  # :name:
    MENTION = auto()  # @name
    LINK = auto()  # https://example.com or www.example.com


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the tokenizer.

    Attributes:
        type: The token type
        text: Semantic payload. Inner text for delimited spans, the
            canonical name for emoji, the matched name (without ``@``) for
            mentions, the URL for links and the literal run for text.
        raw: The exact substring consumed from the input, delimiters and
            sigils included. Defaults to ``text``.

    Joining ``raw`` over a token list reproduces the tokenized input.

    """

    type: TokenType
    text: str
    raw: str = field(default="")

    def __post_init__(self) -> None:
        if not self.raw:
            object.__setattr__(self, "raw", self.text)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.raw
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r})"


__all__ = [
    "Token",
    "TokenType",
]
