"""Parse options for chatmarkup.

MarkupOptions carries the caller-supplied lists of mentionable names and
emoji shortcodes. One instance is read (never written) by the tokenizer for
a whole top-level parse call, including every recursive re-parse of nested
spans.

A default instance can also be installed per context with a ContextVar, so
that a chat room or request handler can set its member list once and call
``parse(message)`` without threading options through every layer.

Thread Safety:
    MarkupOptions is frozen. ContextVars are thread-local by design. Each
    thread (and each asyncio task) sees its own default.

Usage:
    from chatmarkup import parse, MarkupOptions

    options = MarkupOptions(mentions=("alice", "bob"), emoji_names=("wave",))
    nodes = parse("hi @Alice :wave:", options)

    # Or install a default for the current context
    with markup_options_context(options):
        nodes = parse("hi @Alice :wave:")

"""

from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

# Wire-style keys accepted by from_dict, mapped onto field names
_KEY_ALIASES = {
    "emojiNames": "emoji_names",
}


def _normalize_names(names: Iterable[str]) -> tuple[str, ...]:
    if isinstance(names, str):
        msg = "Expected an iterable of names, got a single string"
        raise TypeError(msg)
    return tuple(name for name in names if name)


@dataclass(frozen=True, slots=True)
class MarkupOptions:
    """Immutable parse options.

    Attributes:
        mentions: Names that can be @-mentioned, compared case-insensitively.
            Order is irrelevant, duplicates are tolerated and empty names are
            dropped.
        emoji_names: Whitelist of :emoji: shortcodes. None accepts any
            well-formed shortcode.

    """

    mentions: tuple[str, ...] = ()
    emoji_names: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        # Accept lists, sets and generators; store tuples so options hash
        object.__setattr__(self, "mentions", _normalize_names(self.mentions))
        if self.emoji_names is not None:
            object.__setattr__(self, "emoji_names", _normalize_names(self.emoji_names))

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "MarkupOptions":
        """Create MarkupOptions from a mapping.

        Accepts both ``emoji_names`` and the ``emojiNames`` spelling used by
        chat front ends. Unknown keys are silently ignored. A ``None`` value
        means the option is unset.

        Example:
            >>> opts = MarkupOptions.from_dict({"mentions": ["a"], "emojiNames": ["b"]})
            >>> opts.emoji_names
            ('b',)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered: dict[str, Any] = {}
        for key, value in options.items():
            key = _KEY_ALIASES.get(key, key)
            if key in valid_fields and value is not None:
                filtered[key] = value
        return cls(**filtered)


_DEFAULT_OPTIONS: MarkupOptions = MarkupOptions()

_markup_options: ContextVar[MarkupOptions] = ContextVar(
    "markup_options",
    default=_DEFAULT_OPTIONS,
)


def get_markup_options() -> MarkupOptions:
    """Get the default options for the current context."""
    return _markup_options.get()


def set_markup_options(options: MarkupOptions) -> None:
    """Set the default options for the current context.

    Only affects the current thread/task context.
    """
    _markup_options.set(options)


def reset_markup_options() -> None:
    """Reset the current context to empty options."""
    _markup_options.set(_DEFAULT_OPTIONS)


@contextmanager
def markup_options_context(options: MarkupOptions) -> Iterator[None]:
    """Context manager for temporary default options.

    Restores the previous options even if an exception is raised.

    Example:
        >>> with markup_options_context(MarkupOptions(mentions=("bob",))):
        ...     nodes = parse("hey @bob")
        >>> # Previous options restored here

    """
    previous = _markup_options.get()
    _markup_options.set(options)
    try:
        yield
    finally:
        _markup_options.set(previous)


def resolve_options(options: MarkupOptions | Mapping[str, Any] | None) -> MarkupOptions:
    """Turn whatever the caller passed into a MarkupOptions instance.

    None falls back to the context default; mappings go through from_dict.
    """
    if options is None:
        return _markup_options.get()
    if isinstance(options, MarkupOptions):
        return options
    return MarkupOptions.from_dict(options)


__all__ = [
    "MarkupOptions",
    "get_markup_options",
    "markup_options_context",
    "reset_markup_options",
    "resolve_options",
    "set_markup_options",
]
