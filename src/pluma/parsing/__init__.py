"""Parsing subsystem for Pluma.

Provides mixin classes for modular parsing functionality:
- `InlineParsingMixin`: Inline content (emphasis, code spans, links, images)
- `BlockParsingMixin`: Block constructors and multi-line accumulators

Example:
    >>> from pluma.parsing import InlineParsingMixin, BlockParsingMixin
    >>> class Parser(InlineParsingMixin, BlockParsingMixin):
    ...     pass

"""

from pluma.parsing.blocks import BlockParsingMixin
from pluma.parsing.inline import InlineParsingMixin

__all__ = [
    "InlineParsingMixin",
    "BlockParsingMixin",
]
