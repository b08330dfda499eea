"""Name matching helpers shared by the tokenizer.

Mentions and emoji names are configured by the caller and compared
case-insensitively against the message. The configured spelling is the
source of truth: emoji resolve to the configured casing, mentions keep the
casing typed by the user.

Compiled lookups are memoized per distinct tuple of names, so a chat client
that parses many messages against the same member list compiles its mention
pattern once.

Thread Safety:
functools.lru_cache is thread-safe. Returned patterns and dicts are never
mutated after construction.

"""

import re
from functools import lru_cache

from chatmarkup.utils.logger import get_logger

logger = get_logger(__name__)

EMOJI_PATTERN = re.compile(r":([A-Za-z0-9_+-]+):")


@lru_cache(maxsize=64)
def emoji_lookup(names: tuple[str, ...]) -> dict[str, str]:
    """Map case-folded emoji names to their configured spelling.

    The first configured spelling wins when two names fold together.
    """
    lookup: dict[str, str] = {}
    for name in names:
        lookup.setdefault(name.casefold(), name)
    return lookup


def find_emoji(names: tuple[str, ...], candidate: str) -> str | None:
    """Case-insensitively find ``candidate`` among configured emoji names.

    Returns:
        The configured name (with its casing), or None if not whitelisted.

    Example:
        >>> find_emoji(("ABc",), "abC")
        'ABc'

    """
    return emoji_lookup(names).get(candidate.casefold())


@lru_cache(maxsize=64)
def mention_pattern(mentions: tuple[str, ...]) -> re.Pattern[str] | None:
    """Compile a pattern matching any configured name at the start of text.

    Names are tried longest first so that ``testOneTwo`` wins over its
    prefix ``testOne``. A name only matches when it is followed by a word
    boundary, a non-word character or the end of the text.

    Returns:
        Compiled pattern with the matched name in group 1, or None when no
        names are configured.

    """
    names = sorted({m for m in mentions if m}, key=lambda m: (-len(m), m))
    if not names:
        return None
    logger.debug("Compiling mention pattern for %d names", len(names))
    alternatives = "|".join(re.escape(name) for name in names)
    return re.compile(rf"({alternatives})(?:\b|(?=\W)|\Z)", re.IGNORECASE)


__all__ = [
    "EMOJI_PATTERN",
    "emoji_lookup",
    "find_emoji",
    "mention_pattern",
]
