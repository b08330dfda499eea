"""URL recognition for chatmarkup.

Recognizes two shapes of link, always anchored at the given position:

- ``scheme://`` URLs for any letter scheme (and protocol-relative ``//``)
- bare ``www.`` hosts, which need no scheme

Both accept optional userinfo, a host that is either ``localhost`` or
domain labels ending in a two-or-more letter TLD, an optional port and an
optional path/query/fragment running up to whitespace or a double quote.

The grammar follows kevva/url-regex. Userinfo and host labels are written
without overlapping or nested optional quantifiers so that long non-URL runs
fail in linear time.

Thread Safety:
Compiled patterns are immutable. All functions are pure.

"""

import re

_LABEL_CHAR = r"a-z\u00a1-\uffff0-9"

_PROTOCOL = r"(?:(?:[a-z]+:)?//)"
_AUTH = r"(?:[^\s:@/]+(?::[^\s@/]*)?@)?"
_HOST = rf"(?:[{_LABEL_CHAR}]+(?:-+[{_LABEL_CHAR}]+)*)"
_DOMAIN = rf"(?:\.[{_LABEL_CHAR}]+(?:-+[{_LABEL_CHAR}]+)*)*"
_TLD = r"(?:\.(?:[a-z\u00a1-\uffff]{2,}))\.?"
_PORT = r"(?::[0-9]{2,5})?"
_PATH = r'(?:[/?#][^\s"]*)?'

URL_PATTERN = re.compile(
    rf"(?:{_PROTOCOL}|www\.){_AUTH}(?:localhost|{_HOST}{_DOMAIN}{_TLD}){_PORT}{_PATH}",
    re.IGNORECASE,
)

_SCHEME = re.compile(r"[a-z]+:", re.IGNORECASE)


def match_url(text: str, pos: int = 0) -> str | None:
    """Return the URL starting exactly at ``pos``, or None.

    Example:
        >>> match_url("see www.example.com/a?b", 4)
        'www.example.com/a?b'
        >>> match_url("see www.example.com") is None
        True

    """
    match = URL_PATTERN.match(text, pos)
    if match is None:
        return None
    return match.group(0)


def httpify(text: str) -> str:
    """Add ``http://`` to a URL that has no ``letters:`` scheme prefix.

    The scheme check ignores case. Protocol-relative text has no scheme
    and is prefixed like any other.

    Example:
        >>> httpify("www.example.com")
        'http://www.example.com'
        >>> httpify("https://example.com")
        'https://example.com'

    """
    if _SCHEME.match(text) is not None:
        return text
    return f"http://{text}"


__all__ = [
    "URL_PATTERN",
    "httpify",
    "match_url",
]
