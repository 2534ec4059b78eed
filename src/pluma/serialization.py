"""Token-tree serialization: JSON round-trip for Pluma nodes.

Converts typed tokens to/from JSON-compatible dicts. Useful for caching
tokenized documents and for inspecting trees while debugging.

All output is deterministic (sorted keys).

Example:
    from pluma import parse
    from pluma.serialization import to_json, from_json

    doc = parse("# Hello **World**")
    restored = from_json(to_json(doc))
    assert doc == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Mapping
from dataclasses import fields
from typing import Any

from pluma.location import SourceLocation
from pluma.nodes import (
    CodeBlock,
    CodeSpan,
    Document,
    Emphasis,
    Header,
    HorizontalRule,
    Image,
    LineBreak,
    Link,
    Node,
    Note,
    OrderedList,
    OrderedListBlock,
    Paragraph,
    Quote,
    Strong,
    Text,
    UnorderedList,
    UnorderedListBlock,
)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (
        Document,
        Header,
        Paragraph,
        CodeBlock,
        Quote,
        OrderedListBlock,
        UnorderedListBlock,
        OrderedList,
        UnorderedList,
        Note,
        HorizontalRule,
        Text,
        Emphasis,
        Strong,
        CodeSpan,
        Link,
        Image,
        LineBreak,
    )
}

_LOCATION_TYPE = "SourceLocation"
_REFERENCES_TYPE = "References"


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes child tokens and SourceLocation objects.

    Args:
        node: Any Pluma token.

    Returns:
        Dict with ``_type`` and all token fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, SourceLocation):
        return {
            "_type": _LOCATION_TYPE,
            "lineno": value.lineno,
            "col_offset": value.col_offset,
            "end_lineno": value.end_lineno,
            "source_file": value.source_file,
        }
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    if isinstance(value, Mapping):
        # Note names are arbitrary strings, so the mapping is wrapped
        return {"_type": _REFERENCES_TYPE, "items": dict(value)}
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed token from a dict.

    Uses the ``_type`` discriminator to determine the token class.

    Args:
        data: Dict with ``_type`` and token fields (as produced by to_dict).

    Returns:
        Typed token (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name in data:
            kwargs[f.name] = _deserialize_value(data[f.name])
    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        type_name = value.get("_type")
        if type_name == _LOCATION_TYPE:
            return SourceLocation(
                lineno=value["lineno"],
                col_offset=value.get("col_offset", 1),
                end_lineno=value.get("end_lineno"),
                source_file=value.get("source_file"),
            )
        if type_name == _REFERENCES_TYPE:
            return dict(value["items"])
        if type_name is not None:
            return from_dict(value)
        return value
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string with sorted keys.

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Document.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node
