"""List parsing for Pluma parser.

Each list line becomes one item. Consecutive items with the same kind and
marker character share a list block; any other marker starts a new block.
Blank lines between items do not break a list, because blank lines never
produce blocks.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from pluma.nodes import (
    Block,
    OrderedList,
    OrderedListBlock,
    UnorderedList,
    UnorderedListBlock,
)

if TYPE_CHECKING:
    from pluma.location import SourceLocation
    from pluma.tokens import ClassifiedLine


class ListParsingMixin:
    """List item construction and list-block grouping.

    Required Host Methods:
        - _location(lineno, end_lineno) -> SourceLocation
        - _parse_inline(text, location) -> tuple[Inline, ...]

    """

    def _parse_list_item(self, line: ClassifiedLine) -> OrderedList | UnorderedList:
        """Build one list item from a classified line."""
        location: SourceLocation = self._location(line.lineno)  # type: ignore[attr-defined]
        children = self._parse_inline(line.content, location)  # type: ignore[attr-defined]
        if line.ordered:
            return OrderedList(
                line.order,
                line.marker,  # type: ignore[arg-type]
                children,
                location=location,
            )
        return UnorderedList(
            line.marker,  # type: ignore[arg-type]
            children,
            location=location,
        )

    def _append_list_item(
        self, blocks: list[Block], item: OrderedList | UnorderedList
    ) -> None:
        """Append an item to the preceding list block or start a new one.

        The preceding block is extended only when it is a list block of the
        same kind with the same marker, so a block's items always agree
        with the block's marker.
        """
        previous = blocks[-1] if blocks else None

        match item:
            case OrderedList():
                if isinstance(previous, OrderedListBlock) and previous.marker == item.marker:
                    blocks[-1] = dataclasses.replace(
                        previous,
                        items=(*previous.items, item),
                        location=self._extend_location(previous, item),
                    )
                else:
                    blocks.append(
                        OrderedListBlock(
                            item.order, item.marker, (item,), location=item.location
                        )
                    )
            case UnorderedList():
                if isinstance(previous, UnorderedListBlock) and previous.marker == item.marker:
                    blocks[-1] = dataclasses.replace(
                        previous,
                        items=(*previous.items, item),
                        location=self._extend_location(previous, item),
                    )
                else:
                    blocks.append(
                        UnorderedListBlock(item.marker, (item,), location=item.location)
                    )

    def _extend_location(
        self,
        block: OrderedListBlock | UnorderedListBlock,
        item: OrderedList | UnorderedList,
    ) -> SourceLocation | None:
        if block.location is None or item.location is None:
            return block.location
        return block.location.span_to(item.location.lineno)
