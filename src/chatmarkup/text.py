"""Turn markup trees back into strings.

- extract_text: what a reader sees, with styling dropped. Used for
  notification previews and search indexing.
- to_markup: chat markup that parses back to the same tree.

Example:
    >>> from chatmarkup import parse, extract_text, to_markup
    >>> nodes = parse("*hi* @Bob", {"mentions": ["bob"]})
    >>> extract_text(nodes)
    'hi @Bob'
    >>> to_markup(nodes)
    '*hi* @Bob'
"""

from collections.abc import Iterable

from chatmarkup.nodes import Bold, Code, Emoji, Italic, Link, MarkupNode, Mention, Strike

_DELIMITERS: dict[type, str] = {
    Italic: "_",
    Bold: "*",
    Strike: "~",
}


def extract_text(nodes: MarkupNode | Iterable[MarkupNode]) -> str:
    """Extract plain text from a node or a node list.

    Emoji are written as their ``:name:`` shortcode and mentions as
    ``@`` plus the name as typed.

    """
    if isinstance(nodes, str):
        return nodes
    match nodes:
        case Italic(content=content) | Bold(content=content) | Strike(content=content):
            return extract_text(content)
        case Code():
            return nodes.code
        case Emoji(name=name):
            return f":{name}:"
        case Mention(raw=raw):
            return f"@{raw}"
        case Link(text=text):
            return text
    return "".join(extract_text(node) for node in nodes)


def to_markup(nodes: MarkupNode | Iterable[MarkupNode]) -> str:
    """Write a node or node list back as chat markup.

    For any message ``s``, ``to_markup(parse(s)) == s`` unless an emoji
    whitelist changed the casing of a shortcode.

    """
    if isinstance(nodes, str):
        return nodes
    match nodes:
        case Italic(content=content) | Bold(content=content) | Strike(content=content):
            delim = _DELIMITERS[type(nodes)]
            return f"{delim}{to_markup(content)}{delim}"
        case Code():
            return f"`{nodes.code}`"
        case Emoji() | Mention() | Link():
            return extract_text(nodes)
    return "".join(to_markup(node) for node in nodes)


__all__ = [
    "extract_text",
    "to_markup",
]
