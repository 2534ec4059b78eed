"""Inline parsing subsystem for Pluma parser.

Provides mixins for scanning inline content:
- Emphasis and strong (*, _)
- Code spans (`)
- Links and images (literal or reference targets)

Architecture:
Single left-to-right pass with recursive scanning of span contents.
Each recursive call works on a strictly shorter slice.

"""

from __future__ import annotations

from pluma.parsing.inline.core import InlineParsingCoreMixin
from pluma.parsing.inline.emphasis import EmphasisMixin
from pluma.parsing.inline.links import LinkParsingMixin


class InlineParsingMixin(
    InlineParsingCoreMixin,
    EmphasisMixin,
    LinkParsingMixin,
):
    """Combined inline parsing mixin.

    Combines all inline parsing functionality into a single mixin
    that can be inherited by the Parser class.

    Required Host Attributes:
        - _config: ParseConfig

    """

    pass


__all__ = [
    "EmphasisMixin",
    "InlineParsingCoreMixin",
    "InlineParsingMixin",
    "LinkParsingMixin",
]
