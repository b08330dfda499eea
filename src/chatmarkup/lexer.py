"""Single-pass tokenizer for chat markup.

Scans a message left to right with one cursor. At every position the
recognizers below are tried in priority order and the first that matches
consumes input and emits one token:

1. Emoji shortcode     :name:
2. Delimited spans     _italic_  *bold*  `code`  ~strike~
3. Mention             @name (configured names only)
4. Link                https://example.com, www.example.com
5. Word run            everything up to and including the next space

Word runs that follow a text token are merged into it, so a failed
delimiter such as the ``_`` in ``snake_case`` stays in one text run. Any
whitespace right after a consumed span becomes its own text token.

The tokenizer never recurses and never raises. Joining ``raw`` over the
result gives back the input unchanged.

Thread Safety:
Tokenizer instances are single-use. Create one per message.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import re

from chatmarkup.config import MarkupOptions, resolve_options
from chatmarkup.matchers import EMOJI_PATTERN, find_emoji, mention_pattern
from chatmarkup.tokens import Token, TokenType
from chatmarkup.urls import URL_PATTERN

_WHITESPACE = re.compile(r"\s+")

# Span delimiters in priority order. A span closes at the first delimiter
# followed by a non-word character or the end of the message.
_DELIMITERS: tuple[tuple[TokenType, str, re.Pattern[str]], ...] = tuple(
    (token_type, delim, re.compile(re.escape(delim) + r"(?:\W|\Z)"))
    for token_type, delim in (
        (TokenType.ITALIC, "_"),
        (TokenType.BOLD, "*"),
        (TokenType.CODE, "`"),
        (TokenType.STRIKE, "~"),
    )
)


class Tokenizer:
    """Turns one chat message into a flat list of tokens.

    Usage:
        >>> Tokenizer("some *bold* text").tokenize()
        [Token(TEXT, 'some '), Token(BOLD, '*bold*'), Token(TEXT, ' text')]

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_tokens",
        "_emoji_names",
        "_mention_rx",
    )

    def __init__(self, source: str, options: MarkupOptions | None = None) -> None:
        """Initialize tokenizer with message text.

        Args:
            source: The chat message
            options: Mention and emoji configuration (context default if None)
        """
        options = resolve_options(options)
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._tokens: list[Token] = []
        self._emoji_names = options.emoji_names
        self._mention_rx = mention_pattern(options.mentions)

    def tokenize(self) -> list[Token]:
        """Scan the whole message and return its tokens."""
        while self._pos < self._source_len:
            found = (
                self._try_emoji()
                or self._try_delimited()
                or self._try_mention()
                or self._try_link()
            )
            if not found:
                self._consume_word()
            self._consume_space()
        return self._tokens

    # -- Recognizers -----------------------------------------------------------

    def _try_emoji(self) -> bool:
        match = EMOJI_PATTERN.match(self._source, self._pos)
        if match is None:
            return False

        name: str | None = match.group(1)
        if self._emoji_names is not None:
            # Only whitelisted emoji, reported with their configured casing
            name = find_emoji(self._emoji_names, name)
            if name is None:
                return False

        self._emit(TokenType.EMOJI, name, match.group(0))
        return True

    def _try_delimited(self) -> bool:
        source = self._source
        pos = self._pos
        char = source[pos]
        for token_type, delim, close_rx in _DELIMITERS:
            if char != delim:
                continue
            # A doubled delimiter (** or __) never opens a span
            if source.startswith(delim, pos + 1):
                return False
            close = close_rx.search(source, pos + 1)
            if close is None:
                return False
            end = close.start()
            self._emit(token_type, source[pos + 1 : end], source[pos : end + 1])
            return True
        return False

    def _try_mention(self) -> bool:
        if self._mention_rx is None or self._source[self._pos] != "@":
            return False
        match = self._mention_rx.match(self._source, self._pos + 1)
        if match is None:
            return False
        name = match.group(1)
        self._emit(TokenType.MENTION, name, f"@{name}")
        return True

    def _try_link(self) -> bool:
        match = URL_PATTERN.match(self._source, self._pos)
        if match is None:
            return False
        self._emit(TokenType.LINK, match.group(0))
        return True

    # -- Fallbacks -------------------------------------------------------------

    def _consume_word(self) -> None:
        """Consume up to and including the next space, or the rest of input."""
        pos = self._pos
        space = self._source.find(" ", pos + 1)
        end = self._source_len if space == -1 else space + 1
        run = self._source[pos:end]
        self._pos = end

        tokens = self._tokens
        if tokens and tokens[-1].type is TokenType.TEXT:
            tokens[-1] = Token(TokenType.TEXT, tokens[-1].text + run)
        else:
            tokens.append(Token(TokenType.TEXT, run))

    def _consume_space(self) -> None:
        match = _WHITESPACE.match(self._source, self._pos)
        if match is not None:
            self._emit(TokenType.TEXT, match.group(0))

    def _emit(self, token_type: TokenType, text: str, raw: str | None = None) -> None:
        raw = text if raw is None else raw
        self._tokens.append(Token(token_type, text, raw))
        self._pos += len(raw)


def tokenize(text: str, options: MarkupOptions | None = None) -> list[Token]:
    """Tokenize a chat message.

    Args:
        text: The message to scan
        options: Mention and emoji configuration (context default if None)

    Returns:
        Tokens in input order. Empty input yields an empty list.

    """
    return Tokenizer(text, options).tokenize()


__all__ = [
    "Tokenizer",
    "tokenize",
]
