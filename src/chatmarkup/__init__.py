"""
chatmarkup — Inline chat markup parser for Python

Turns a chat message into a typed tree of inline nodes: *bold*, _italic_,
~strike~, `code`, :emoji: shortcodes, @mentions and links. Zero runtime
dependencies; all nodes are frozen dataclasses, plain text is ``str``.

Quick Start:
    >>> from chatmarkup import parse
    >>> parse("some *bold _italic_* text")
    ['some ', Bold(content=('bold ', Italic(content=('italic',)))), ' text']

    >>> # Mentions only resolve against names you configure
    >>> parse("hi @Alice", {"mentions": ["alice", "bob"]})
    ['hi ', Mention(mention='alice', raw='Alice')]

    >>> # An emoji whitelist restricts shortcodes and fixes their casing
    >>> from chatmarkup import MarkupOptions
    >>> parse(":Wave: :nope:", MarkupOptions(emoji_names=("wave",)))
    [Emoji(name='wave'), ' :nope:']

Malformed markup is never an error; it stays literal text. The only
exception parse() raises is InvalidInputError for non-string input.
"""

from chatmarkup.config import (
    MarkupOptions,
    get_markup_options,
    markup_options_context,
    reset_markup_options,
    set_markup_options,
)
from chatmarkup.errors import ChatMarkupError, InvalidInputError, SerializationError
from chatmarkup.lexer import Tokenizer, tokenize
from chatmarkup.nodes import Bold, Code, Emoji, Italic, Link, MarkupNode, Mention, Strike
from chatmarkup.parser import parse
from chatmarkup.serialization import from_data, from_json, to_data, to_json
from chatmarkup.text import extract_text, to_markup
from chatmarkup.tokens import Token, TokenType
from chatmarkup.urls import httpify, match_url
from chatmarkup.visitor import BaseVisitor, collect_mentions, transform

__version__ = "0.1.0"

__all__ = [
    # Parsing
    "parse",
    "tokenize",
    "Tokenizer",
    "Token",
    "TokenType",
    # Options
    "MarkupOptions",
    "get_markup_options",
    "markup_options_context",
    "reset_markup_options",
    "set_markup_options",
    # Nodes
    "MarkupNode",
    "Bold",
    "Code",
    "Emoji",
    "Italic",
    "Link",
    "Mention",
    "Strike",
    # Errors
    "ChatMarkupError",
    "InvalidInputError",
    "SerializationError",
    # Helpers
    "BaseVisitor",
    "collect_mentions",
    "extract_text",
    "from_data",
    "from_json",
    "httpify",
    "match_url",
    "to_data",
    "to_json",
    "to_markup",
    "transform",
    "__version__",
]
