"""Typed markup nodes for chatmarkup.

Plain text is represented by ``str`` itself. Every other node is a frozen
dataclass with slots for:
- Immutability: safe sharing across threads
- Value equality: trees compare with ``==``
- Pattern matching: ``match`` statements work naturally

Node Hierarchy:
MarkupNode
├── str (plain text)
├── Italic    content: tuple[MarkupNode, ...]
├── Bold      content: tuple[MarkupNode, ...]
├── Strike    content: tuple[MarkupNode, ...]
├── Code      content: tuple[str]
├── Emoji     name
├── Mention   mention, raw
└── Link      text, href

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

# =============================================================================
# Container Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Italic:
    """Italicised text.

    Markup: _text_

    """

    type: ClassVar[str] = "italic"

    content: tuple[MarkupNode, ...]


@dataclass(frozen=True, slots=True)
class Bold:
    """Bold text.

    Markup: *text*

    """

    type: ClassVar[str] = "bold"

    content: tuple[MarkupNode, ...]


@dataclass(frozen=True, slots=True)
class Strike:
    """Struck-through text.

    Markup: ~text~

    """

    type: ClassVar[str] = "strike"

    content: tuple[MarkupNode, ...]


@dataclass(frozen=True, slots=True)
class Code:
    """Inline code. Holds exactly one unparsed string.

    Markup: `text`

    """

    type: ClassVar[str] = "code"

    content: tuple[str]

    @property
    def code(self) -> str:
        """The raw code text."""
        return self.content[0]


# =============================================================================
# Leaf Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Emoji:
    """Emoji shortcode.

    Markup: :name:

    """

    type: ClassVar[str] = "emoji"

    name: str


@dataclass(frozen=True, slots=True)
class Mention:
    """Mention of a user or group.

    Markup: @name

    ``mention`` is the lower-cased lookup key; ``raw`` is the name as typed.

    """

    type: ClassVar[str] = "mention"

    mention: str
    raw: str


@dataclass(frozen=True, slots=True)
class Link:
    """Web link.

    ``text`` is the URL as it appeared in the message; ``href`` always
    carries a scheme.

    """

    type: ClassVar[str] = "link"

    text: str
    href: str


type Container = Italic | Bold | Strike

type MarkupNode = str | Italic | Bold | Strike | Code | Emoji | Mention | Link

# Node classes by their ``type`` discriminator
NODE_TYPES: dict[str, type] = {
    cls.type: cls for cls in (Italic, Bold, Strike, Code, Emoji, Mention, Link)
}


__all__ = [
    "NODE_TYPES",
    "Bold",
    "Code",
    "Container",
    "Emoji",
    "Italic",
    "Link",
    "MarkupNode",
    "Mention",
    "Strike",
]
