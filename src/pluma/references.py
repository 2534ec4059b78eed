"""Reference resolution for Pluma token trees.

Links and images written as ``[label][name]`` carry ``via_reference=True``
and hold the note name in ``target``. Notes (``[name]:target``) supply the
actual targets. Resolution is a separate pass over the finished tree so the
tokenizer never has to look ahead.

Lookup rules:
- Only top-level notes count; a later note with the same name wins.
- Names match exactly (case-sensitive, no whitespace folding).
- An unknown name resolves to an empty target and logs a warning.

"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping

from pluma.nodes import Block, Document, Image, Link, Node, Note
from pluma.utils.logger import get_logger, location_suffix
from pluma.visitor import transform

logger = get_logger(__name__)


def collect_references(blocks: Iterable[Block]) -> dict[str, str]:
    """Map note names to targets, last definition winning."""
    references: dict[str, str] = {}
    for block in blocks:
        if isinstance(block, Note):
            if block.name in references:
                logger.debug("Note %r redefined; using the later target", block.name)
            references[block.name] = block.target
    return references


def lookup_reference(references: Mapping[str, str], node: Link | Image) -> str:
    """Return the target a ``via_reference`` link or image points at."""
    target = references.get(node.target)
    if target is None:
        logger.warning(
            "Unresolved reference %r%s", node.target, location_suffix(node.location)
        )
        return ""
    return target


def resolve_references(doc: Document) -> Document:
    """Return a copy of ``doc`` with every reference link and image resolved.

    The document's own ``references`` mapping is used when present,
    otherwise the notes among its children are collected.

    Args:
        doc: Document produced by ``parse``.

    Returns:
        A new Document where no Link or Image has ``via_reference`` set.

    """
    references = doc.references or collect_references(doc.children)

    def _resolve(node: Node) -> Node:
        match node:
            case Link(via_reference=True) | Image(via_reference=True):
                return dataclasses.replace(
                    node,
                    target=lookup_reference(references, node),
                    via_reference=False,
                )
            case _:
                return node

    resolved = transform(doc, _resolve)
    if resolved.references is not references:
        resolved = dataclasses.replace(resolved, references=dict(references))
    return resolved
