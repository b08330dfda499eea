"""Tree builder: turns tokens into markup nodes.

Italic, bold and strike spans are parsed again, recursively, with the same
options, which is how ``*bold _italic_*`` nests. Code spans keep their text
as-is, so markup inside backticks is never interpreted. Every recursive call
works on a strictly shorter string, so depth is bounded by message length.

Thread Safety:
parse() is a pure function of its arguments (plus the context default
options when none are passed). Safe to call from any number of threads.

"""

from collections.abc import Mapping
from typing import Any

from chatmarkup.config import MarkupOptions, resolve_options
from chatmarkup.errors import InvalidInputError
from chatmarkup.lexer import tokenize
from chatmarkup.nodes import Bold, Code, Emoji, Italic, Link, MarkupNode, Mention, Strike
from chatmarkup.tokens import Token, TokenType
from chatmarkup.urls import httpify
from chatmarkup.utils.logger import get_logger

logger = get_logger(__name__)


def parse(
    message: str,
    options: MarkupOptions | Mapping[str, Any] | None = None,
) -> list[MarkupNode]:
    """Parse a chat message into a list of markup nodes.

    Args:
        message: The chat message
        options: Mentionable names and emoji whitelist. Accepts a
            MarkupOptions, a plain mapping (see MarkupOptions.from_dict) or
            None for the context default.

    Returns:
        Nodes in message order. Plain text comes back as ``str``.

    Raises:
        InvalidInputError: If ``message`` is not a string.

    Example:
        >>> parse("some *bold _italic_* text")
        ['some ', Bold(content=('bold ', Italic(content=('italic',)))), ' text']

    """
    if not isinstance(message, str):
        raise InvalidInputError(message)

    resolved = resolve_options(options)
    logger.debug("Parsing message of %d characters", len(message))
    return _build(message, resolved)


def _build(message: str, options: MarkupOptions) -> list[MarkupNode]:
    return [_to_node(token, options) for token in tokenize(message, options)]


def _to_node(token: Token, options: MarkupOptions) -> MarkupNode:
    match token.type:
        case TokenType.TEXT:
            return token.text
        case TokenType.ITALIC:
            return Italic(tuple(_build(token.text, options)))
        case TokenType.BOLD:
            return Bold(tuple(_build(token.text, options)))
        case TokenType.STRIKE:
            return Strike(tuple(_build(token.text, options)))
        case TokenType.CODE:
            return Code((token.text,))
        case TokenType.EMOJI:
            return Emoji(token.text)
        case TokenType.MENTION:
            return Mention(mention=token.text.lower(), raw=token.text)
        case TokenType.LINK:
            return Link(text=token.text, href=httpify(token.text))
    msg = f"Unhandled token type: {token.type!r}"
    raise AssertionError(msg)


__all__ = [
    "parse",
]
