"""Token-tree visitor and transformer for Pluma.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen token trees.

Example, collecting every link target:

    class LinkCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.targets: list[str] = []

        def visit_link(self, node: Link) -> None:
            self.targets.append(node.target)

    collector = LinkCollector()
    collector.visit(doc)

Example, demoting headers:

    def demote(node: Node) -> Node:
        if isinstance(node, Header):
            return dataclasses.replace(node, level=min(node.level + 1, 6))
        return node

    new_doc = transform(doc, demote)

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. The
    transform function is pure.

"""

import dataclasses
from collections.abc import Callable
from typing import Generic, TypeVar

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


T = TypeVar("T")


class BaseVisitor(Generic[T]):
    """Base token visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    # -- Block visitors --------------------------------------------------------

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_header(self, node: Header) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_code_block(self, node: CodeBlock) -> T:
        return self.visit_default(node)

    def visit_quote(self, node: Quote) -> T:
        return self.visit_default(node)

    def visit_ordered_list_block(self, node: OrderedListBlock) -> T:
        return self.visit_default(node)

    def visit_unordered_list_block(self, node: UnorderedListBlock) -> T:
        return self.visit_default(node)

    def visit_ordered_list(self, node: OrderedList) -> T:
        return self.visit_default(node)

    def visit_unordered_list(self, node: UnorderedList) -> T:
        return self.visit_default(node)

    def visit_note(self, node: Note) -> T:
        return self.visit_default(node)

    def visit_horizontal_rule(self, node: HorizontalRule) -> T:
        return self.visit_default(node)

    # -- Inline visitors -------------------------------------------------------

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_emphasis(self, node: Emphasis) -> T:
        return self.visit_default(node)

    def visit_strong(self, node: Strong) -> T:
        return self.visit_default(node)

    def visit_code_span(self, node: CodeSpan) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Link) -> T:
        return self.visit_default(node)

    def visit_image(self, node: Image) -> T:
        return self.visit_default(node)

    def visit_line_break(self, node: LineBreak) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        """Match-based dispatch to visit_* methods."""
        match node:
            case Document():
                return self.visit_document(node)
            case Header():
                return self.visit_header(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case CodeBlock():
                return self.visit_code_block(node)
            case Quote():
                return self.visit_quote(node)
            case OrderedListBlock():
                return self.visit_ordered_list_block(node)
            case UnorderedListBlock():
                return self.visit_unordered_list_block(node)
            case OrderedList():
                return self.visit_ordered_list(node)
            case UnorderedList():
                return self.visit_unordered_list(node)
            case Note():
                return self.visit_note(node)
            case HorizontalRule():
                return self.visit_horizontal_rule(node)
            case Text():
                return self.visit_text(node)
            case Emphasis():
                return self.visit_emphasis(node)
            case Strong():
                return self.visit_strong(node)
            case CodeSpan():
                return self.visit_code_span(node)
            case Link():
                return self.visit_link(node)
            case Image():
                return self.visit_image(node)
            case LineBreak():
                return self.visit_line_break(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        """Recursively visit child nodes."""
        match node:
            case OrderedListBlock(items=items) | UnorderedListBlock(items=items):
                for item in items:
                    self.visit(item)
            case (
                Document(children=children)
                | Header(children=children)
                | Paragraph(children=children)
                | Quote(children=children)
                | OrderedList(children=children)
                | UnorderedList(children=children)
                | Emphasis(children=children)
                | Strong(children=children)
                | CodeSpan(children=children)
            ):
                for child in children:
                    self.visit(child)
            case _:
                pass  # Leaf nodes: no children


def transform(doc: Document, fn: Callable[[Node], Node | None]) -> Document:
    """Apply a function to every node in the tree, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children.

    Return ``None`` from ``fn`` to remove a node from the tree. The root
    Document cannot be removed; returning None for it raises TypeError.
    A list block whose items are all removed is dropped as well, since a
    list block is never empty.

    Args:
        doc: The document to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node from the tree.

    Returns:
        A new Document with the transformation applied.

    """
    result = _transform_node(doc, fn)
    if result is None or not isinstance(result, Document):
        msg = "transform fn must return a Document for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Transform a single node bottom-up: children first, then self."""
    transformed = _transform_children(node, fn)
    if transformed is None:
        return None
    return fn(transformed)


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Produce a new node with children transformed; filter out removed nodes."""

    def _filtered(children: tuple[Node, ...]) -> tuple[Node, ...]:
        return tuple(
            result for c in children
            if (result := _transform_node(c, fn)) is not None
        )

    match node:
        case OrderedListBlock(items=items) | UnorderedListBlock(items=items):
            new_items = _filtered(items)
            if not new_items:
                return None
            if new_items != items:
                return dataclasses.replace(node, items=new_items)
        case (
            Document(children=children)
            | Header(children=children)
            | Paragraph(children=children)
            | Quote(children=children)
            | OrderedList(children=children)
            | UnorderedList(children=children)
            | Emphasis(children=children)
            | Strong(children=children)
            | CodeSpan(children=children)
        ):
            new_children = _filtered(children)
            if new_children != children:
                return dataclasses.replace(node, children=new_children)
        case _:
            pass  # Leaf nodes: return as-is

    return node
