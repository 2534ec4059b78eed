"""Link and image scanning for Pluma parser.

Two shapes are recognized after the bracketed label:
- ``[label](target)``: literal target
- ``[label][name]``: reference name, resolved later against notes

Labels and targets are taken verbatim up to the first closing bracket or
parenthesis; they are not inline-scanned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pluma.nodes import Image, Link

if TYPE_CHECKING:
    from pluma.location import SourceLocation


def _parse_bracketed_target(text: str, pos: int) -> tuple[str, str, bool, int] | None:
    """Parse ``[label](target)`` or ``[label][name]`` starting at ``pos``.

    Args:
        text: Text being scanned
        pos: Index of the opening ``[``

    Returns:
        (label, target, via_reference, end_pos) or None if malformed.
        A reference name must be non-empty.

    """
    label_end = text.find("]", pos + 1)
    if label_end == -1 or label_end + 1 >= len(text):
        return None

    label = text[pos + 1 : label_end]
    opener = text[label_end + 1]

    if opener == "(":
        close = text.find(")", label_end + 2)
        if close == -1:
            return None
        return label, text[label_end + 2 : close], False, close + 1

    if opener == "[":
        close = text.find("]", label_end + 2)
        if close <= label_end + 2:
            return None
        return label, text[label_end + 2 : close], True, close + 1

    return None


class LinkParsingMixin:
    """Mixin for link and image scanning.

    Required Host Attributes: None

    Required Host Methods: None

    """

    def _try_parse_link(
        self, text: str, pos: int, location: SourceLocation | None
    ) -> tuple[Link, int] | None:
        """Try to parse a link at ``pos`` (which holds ``[``)."""
        parsed = _parse_bracketed_target(text, pos)
        if parsed is None:
            return None
        label, target, via_reference, end = parsed
        return Link(label, target, via_reference, location=location), end

    def _try_parse_image(
        self, text: str, pos: int, location: SourceLocation | None
    ) -> tuple[Image, int] | None:
        """Try to parse an image at ``pos`` (which holds ``!``)."""
        if pos + 1 >= len(text) or text[pos + 1] != "[":
            return None
        parsed = _parse_bracketed_target(text, pos + 1)
        if parsed is None:
            return None
        label, target, via_reference, end = parsed
        return Image(label, target, via_reference, location=location), end
