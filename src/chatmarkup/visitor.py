"""Visitor and transformer for markup trees.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen trees.

Example — collect every link:

    class LinkCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.hrefs: list[str] = []

        def visit_link(self, node: Link) -> None:
            self.hrefs.append(node.href)

    collector = LinkCollector()
    collector.visit_all(parse("see www.example.com"))

Example — drop every emoji:

    def no_emoji(node: MarkupNode) -> MarkupNode | None:
        return None if isinstance(node, Emoji) else node

    plain = transform(nodes, no_emoji)

Thread Safety:
    Visitors may accumulate mutable state; create a new visitor per thread.
    transform() and collect_mentions() are pure.

"""

import dataclasses
from collections.abc import Callable, Iterable

from chatmarkup.nodes import Bold, Code, Emoji, Italic, Link, MarkupNode, Mention, Strike


class BaseVisitor[T]:
    """Base visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children of
    italic, bold and strike nodes are walked automatically after the
    ``visit_*`` call.

    """

    def visit(self, node: MarkupNode) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        if isinstance(node, (Italic, Bold, Strike)):
            for child in node.content:
                self.visit(child)
        return result

    def visit_all(self, nodes: Iterable[MarkupNode]) -> list[T]:
        """Visit every node of a list, as returned by parse()."""
        return [self.visit(node) for node in nodes]

    def visit_default(self, node: MarkupNode) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    def visit_text(self, node: str) -> T:
        return self.visit_default(node)

    def visit_italic(self, node: Italic) -> T:
        return self.visit_default(node)

    def visit_bold(self, node: Bold) -> T:
        return self.visit_default(node)

    def visit_strike(self, node: Strike) -> T:
        return self.visit_default(node)

    def visit_code(self, node: Code) -> T:
        return self.visit_default(node)

    def visit_emoji(self, node: Emoji) -> T:
        return self.visit_default(node)

    def visit_mention(self, node: Mention) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Link) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: MarkupNode) -> T:
        match node:
            case str():
                return self.visit_text(node)
            case Italic():
                return self.visit_italic(node)
            case Bold():
                return self.visit_bold(node)
            case Strike():
                return self.visit_strike(node)
            case Code():
                return self.visit_code(node)
            case Emoji():
                return self.visit_emoji(node)
            case Mention():
                return self.visit_mention(node)
            case Link():
                return self.visit_link(node)
            case _:
                return self.visit_default(node)


def transform(
    nodes: Iterable[MarkupNode],
    fn: Callable[[MarkupNode], MarkupNode | None],
) -> list[MarkupNode]:
    """Apply a function to every node, returning a new node list.

    ``fn`` is called bottom-up: children are transformed first, then the
    parent receives its new children. Return None from ``fn`` to remove a
    node. The input tree is untouched.

    """
    return [result for node in nodes if (result := _transform_node(node, fn)) is not None]


def _transform_node(
    node: MarkupNode,
    fn: Callable[[MarkupNode], MarkupNode | None],
) -> MarkupNode | None:
    if isinstance(node, (Italic, Bold, Strike)):
        new_content = tuple(transform(node.content, fn))
        if new_content != node.content:
            node = dataclasses.replace(node, content=new_content)
    return fn(node)


class _MentionCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.mentions: dict[str, None] = {}

    def visit_mention(self, node: Mention) -> None:
        self.mentions.setdefault(node.mention)


def collect_mentions(nodes: Iterable[MarkupNode]) -> list[str]:
    """Return the distinct mention keys in a tree, in order of appearance.

    Example:
        >>> collect_mentions(parse("@Bob *and @bob*", {"mentions": ["bob"]}))
        ['bob']

    """
    collector = _MentionCollector()
    collector.visit_all(nodes)
    return list(collector.mentions)


__all__ = [
    "BaseVisitor",
    "collect_mentions",
    "transform",
]
