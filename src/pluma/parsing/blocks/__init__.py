"""Block parsing subsystem for Pluma parser.

Provides mixins for building block tokens:
- Headers, paragraphs, notes, horizontal rules
- Code fences and quotes (multi-line accumulators)
- List items and list-block grouping

Architecture:
- core: single-line blocks and the multi-line accumulators
- list: list items and marker-compatible grouping

"""

from pluma.parsing.blocks.core import BlockParsingCoreMixin
from pluma.parsing.blocks.list import ListParsingMixin


class BlockParsingMixin(
    BlockParsingCoreMixin,
    ListParsingMixin,
):
    """Combined block parsing mixin.

    Required Host Attributes:
        - _source_file: str | None

    Required Host Methods:
        - _parse_inline(text, location) -> tuple[Inline, ...]

    """

    pass


__all__ = [
    "BlockParsingCoreMixin",
    "BlockParsingMixin",
    "ListParsingMixin",
]
