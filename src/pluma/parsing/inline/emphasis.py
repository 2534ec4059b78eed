"""Emphasis, strong, and code span scanning for Pluma parser.

Matching is non-greedy: a span closes at the first occurrence of its
closing marker that is not preceded by a backslash. A double marker is
tried before a single one, so ``**x**`` is Strong rather than nested
Emphasis. Backticks never double.

Thread Safety:
All methods are stateless. Safe for concurrent use when each parser
instance is used by one thread.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pluma.nodes import CodeSpan, Emphasis, Inline, Strong, Text
from pluma.parsing.charsets import CODE_MARKER, ESCAPE_CHAR

if TYPE_CHECKING:
    from pluma.config import ParseConfig
    from pluma.location import SourceLocation


def _find_closer(text: str, content_start: int, delim: str) -> int:
    """Find the first unescaped ``delim`` that leaves a non-empty span.

    Args:
        text: Text being scanned
        content_start: Index just past the opening marker
        delim: Closing marker (``*``, ``**``, ``` ` ```, ...)

    Returns:
        Index of the closing marker, or -1.
    """
    search = content_start + 1
    while True:
        idx = text.find(delim, search)
        if idx == -1:
            return -1
        if text[idx - 1] != ESCAPE_CHAR:
            return idx
        search = idx + 1


class EmphasisMixin:
    """Mixin for marker-delimited spans (``*``, ``_``, ``` ` ```).

    Required Host Attributes:
        - _config: ParseConfig

    Required Host Methods:
        - _parse_inline(text, location, depth) -> tuple[Inline, ...]

    """

    _config: ParseConfig

    def _try_parse_delimited(
        self,
        text: str,
        pos: int,
        location: SourceLocation | None,
        depth: int,
    ) -> tuple[Inline, int] | None:
        """Try to match a marker-delimited span starting at ``pos``.

        Returns:
            (node, position after the closing marker) or None.
        """
        marker = text[pos]
        if marker != CODE_MARKER:
            result = self._try_parse_marker_run(text, pos, marker, 2, location, depth)
            if result is not None:
                return result
        return self._try_parse_marker_run(text, pos, marker, 1, location, depth)

    def _try_parse_marker_run(
        self,
        text: str,
        pos: int,
        marker: str,
        count: int,
        location: SourceLocation | None,
        depth: int,
    ) -> tuple[Inline, int] | None:
        """Match ``count`` markers, a non-empty body, and the same closer."""
        delim = marker * count
        if not text.startswith(delim, pos):
            return None

        content_start = pos + count
        close = _find_closer(text, content_start, delim)
        if close == -1:
            return None

        children = self._parse_span_contents(
            text[content_start:close], marker, location, depth
        )
        node: Inline
        if marker == CODE_MARKER:
            node = CodeSpan(children, location=location)
        elif count == 2:
            node = Strong(marker, children, location=location)  # type: ignore[arg-type]
        else:
            node = Emphasis(marker, children, location=location)  # type: ignore[arg-type]
        return node, close + count

    def _parse_span_contents(
        self,
        inner: str,
        marker: str,
        location: SourceLocation | None,
        depth: int,
    ) -> tuple[Inline, ...]:
        """Scan a span's inner text, or keep it literal past the depth cap."""
        config = self._config
        if marker == CODE_MARKER and config.literal_code_spans:
            return (Text(inner, location=location),)
        if depth + 1 >= config.max_inline_depth:
            return (Text(inner, location=location),)
        return self._parse_inline(inner, location, depth + 1)  # type: ignore[attr-defined]
