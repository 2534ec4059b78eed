"""Core block parsing for Pluma parser.

Builds single-line blocks (headers, paragraphs, notes, rules) and runs the
multi-line accumulators for code fences and quotes. Accumulators take the
full line list and the index of the opening line and return the finished
block with the index of the first line they did not consume.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pluma.location import SourceLocation
from pluma.nodes import (
    CodeBlock,
    Header,
    HorizontalRule,
    Inline,
    LineBreak,
    Note,
    Paragraph,
    Quote,
)
from pluma.parsing.charsets import FENCE_MARKER, HARD_BREAK_SUFFIX, QUOTE_MARKER

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pluma.tokens import ClassifiedLine


class BlockParsingCoreMixin:
    """Block constructors and multi-line accumulators.

    Required Host Attributes:
        - _source_file: str | None

    Required Host Methods:
        - _parse_inline(text, location) -> tuple[Inline, ...]

    """

    _source_file: str | None

    def _location(self, lineno: int, end_lineno: int | None = None) -> SourceLocation:
        """Location for a block starting on ``lineno`` (1-indexed)."""
        return SourceLocation(
            lineno=lineno,
            col_offset=1,
            end_lineno=end_lineno if end_lineno is not None else lineno,
            source_file=self._source_file,
        )

    # =========================================================================
    # Single-line blocks
    # =========================================================================

    def _parse_header(self, line: ClassifiedLine) -> Header:
        """Build a header from a classified line."""
        location = self._location(line.lineno)
        return Header(
            line.level,  # type: ignore[arg-type]
            self._parse_inline(line.content, location),  # type: ignore[attr-defined]
            location=location,
        )

    def _parse_paragraph(self, line: ClassifiedLine) -> Paragraph:
        """Build a paragraph by inline-scanning the whole line."""
        location = self._location(line.lineno)
        return Paragraph(
            self._parse_inline(line.line, location),  # type: ignore[attr-defined]
            location=location,
        )

    def _parse_note(self, line: ClassifiedLine) -> Note:
        """Build a link reference definition."""
        return Note(line.name, line.target, location=self._location(line.lineno))

    def _parse_horizontal_rule(self, line: ClassifiedLine) -> HorizontalRule:
        return HorizontalRule(location=self._location(line.lineno))

    # =========================================================================
    # Multi-line accumulators
    # =========================================================================

    def _parse_code_fence(self, lines: Sequence[str], index: int) -> tuple[CodeBlock, int]:
        """Consume a fenced code block.

        Lines are taken verbatim (no inline scanning, blank lines kept)
        until a line equal to the fence marker or the end of input. The
        closing fence is consumed but not part of the text.

        Args:
            lines: All source lines
            index: Index of the opening fence line

        Returns:
            (CodeBlock, index of the first line after the block)
        """
        start = index + 1
        end = start
        while end < len(lines) and lines[end] != FENCE_MARKER:
            end += 1

        text = "\n".join(lines[start:end])
        if end < len(lines):
            # Closing fence found
            next_index = end + 1
            last_lineno = end + 1
        else:
            next_index = end
            last_lineno = len(lines)

        return CodeBlock(text, location=self._location(index + 1, last_lineno)), next_index

    def _parse_quote(self, lines: Sequence[str], index: int) -> tuple[Quote, int]:
        """Consume a block quote.

        The ``>`` is stripped from the first line only. While the last
        consumed line ends with two spaces, the next non-blank line joins
        the quote. Each line is inline-scanned on its own and a LineBreak
        separates consecutive lines. Trailing spaces stay in the text.

        Args:
            lines: All source lines
            index: Index of the first quote line

        Returns:
            (Quote, index of the first line after the quote)
        """
        first = lines[index]
        if first.startswith(QUOTE_MARKER):
            first = first[len(QUOTE_MARKER) :]

        group = [first]
        cursor = index + 1
        while (
            cursor < len(lines)
            and lines[cursor - 1].endswith(HARD_BREAK_SUFFIX)
            and lines[cursor] != ""
        ):
            group.append(lines[cursor])
            cursor += 1

        location = self._location(index + 1, cursor)
        children: list[Inline] = []
        for i, text in enumerate(group):
            if i:
                children.append(LineBreak(location=location))
            children.extend(self._parse_inline(text, location))  # type: ignore[attr-defined]

        return Quote(tuple(children), location=location), cursor
