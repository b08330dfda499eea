"""Serialization of markup trees to and from JSON-compatible data.

The data shape is the one chat front ends consume directly: plain text
stays a string, every other node becomes a dict with a ``type`` key.

    >>> to_data(parse("hi *there* :wave:"))
    ['hi ', {'type': 'bold', 'content': ['there']}, ' ', {'type': 'emoji', 'name': 'wave'}]

All output is deterministic (sorted keys) for cache-key stability.

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

import json
from collections.abc import Iterable
from dataclasses import fields
from typing import Any

from chatmarkup.errors import SerializationError
from chatmarkup.nodes import NODE_TYPES, Bold, Code, Italic, MarkupNode, Strike

# Node classes whose content is a tuple of child nodes
_CONTAINERS = (Italic, Bold, Strike)


def to_dict(node: MarkupNode) -> Any:
    """Convert one node to JSON-compatible data.

    Strings are returned unchanged; other nodes become a dict with a
    ``type`` discriminator and one key per field.

    """
    if isinstance(node, str):
        return node

    result: dict[str, Any] = {"type": node.type}
    for f in fields(node):
        value = getattr(node, f.name)
        if isinstance(node, _CONTAINERS) and f.name == "content":
            result[f.name] = [to_dict(child) for child in value]
        elif isinstance(value, tuple):
            result[f.name] = list(value)
        else:
            result[f.name] = value
    return result


def from_dict(data: Any) -> MarkupNode:
    """Reconstruct a node from data produced by to_dict.

    Raises:
        SerializationError: If ``type`` is missing or unknown, or a field
            is missing.

    """
    if isinstance(data, str):
        return data
    if not isinstance(data, dict):
        msg = f"Expected a string or dict, got {type(data).__name__}"
        raise SerializationError(msg)

    type_name = data.get("type")
    if type_name is None:
        msg = "Missing 'type' field in serialized node"
        raise SerializationError(msg)

    node_cls = NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise SerializationError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            msg = f"Missing field {f.name!r} in serialized {type_name} node"
            raise SerializationError(msg)
        value = data[f.name]
        if node_cls in _CONTAINERS:
            value = _children(value)
        elif node_cls is Code:
            value = _code_content(value)
        kwargs[f.name] = value

    return node_cls(**kwargs)


def _children(value: Any) -> tuple[MarkupNode, ...]:
    if not isinstance(value, list):
        msg = f"Container content must be a list, got {type(value).__name__}"
        raise SerializationError(msg)
    return tuple(from_dict(child) for child in value)


def _code_content(value: Any) -> tuple[str]:
    if isinstance(value, list) and len(value) == 1 and isinstance(value[0], str):
        return (value[0],)
    msg = "Code content must be a list holding exactly one string"
    raise SerializationError(msg)


def to_data(nodes: Iterable[MarkupNode]) -> list[Any]:
    """Convert a node list (as returned by parse) to JSON-compatible data."""
    return [to_dict(node) for node in nodes]


def from_data(data: Any) -> list[MarkupNode]:
    """Reconstruct a node list from data produced by to_data.

    Raises:
        SerializationError: If ``data`` is not a list or holds a bad node.

    """
    if not isinstance(data, list):
        msg = f"Expected a list of nodes, got {type(data).__name__}"
        raise SerializationError(msg)
    return [from_dict(item) for item in data]


def to_json(nodes: Iterable[MarkupNode], *, indent: int | None = None) -> str:
    """Serialize a node list to a JSON string.

    Args:
        nodes: Nodes to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_data(nodes), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> list[MarkupNode]:
    """Deserialize a node list from a JSON string.

    Raises:
        SerializationError: If the JSON does not describe a node list.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON: {exc}"
        raise SerializationError(msg) from exc
    return from_data(raw)


__all__ = [
    "from_data",
    "from_dict",
    "from_json",
    "to_data",
    "to_dict",
    "to_json",
]
