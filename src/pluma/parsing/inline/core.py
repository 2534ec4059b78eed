"""Core inline scanning for Pluma parser.

Walks a line left to right, emitting maximal Text runs between trigger
characters and handing each trigger to the construct-specific scanner.
A trigger whose construct does not match degrades to a one-character Text.

Thread Safety:
All methods are stateless. Safe for concurrent use when each parser
instance is used by one thread.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pluma.nodes import Inline, Text
from pluma.parsing.charsets import ESCAPE_CHAR, INLINE_TRIGGERS

if TYPE_CHECKING:
    from pluma.location import SourceLocation


class InlineParsingCoreMixin:
    """Core inline scanning loop.

    Required Host Methods (from other mixins):
        - _try_parse_image(text, pos, location) -> tuple | None
        - _try_parse_link(text, pos, location) -> tuple | None
        - _try_parse_delimited(text, pos, location, depth) -> tuple | None

    """

    def _parse_inline(
        self,
        text: str,
        location: SourceLocation | None = None,
        depth: int = 0,
    ) -> tuple[Inline, ...]:
        """Scan one line of text into inline tokens.

        Never fails. Every character of ``text`` ends up in exactly one
        token (markers are consumed by the construct they delimit).

        Args:
            text: Raw text of one line (or of a span's inner content)
            location: Location of the enclosing block, copied onto tokens
            depth: Current span nesting depth

        Returns:
            Tuple of inline tokens in source order.
        """
        if not text:
            return ()

        tokens: list[Inline] = []
        tokens_append = tokens.append
        pos = 0
        text_len = len(text)

        while pos < text_len:
            char = text[pos]

            # Plain run. An escaped trigger starts a run instead of a construct.
            if char not in INLINE_TRIGGERS or self._is_escaped(text, pos):
                end = pos + 1
                while end < text_len and text[end] not in INLINE_TRIGGERS:
                    end += 1
                tokens_append(Text(text[pos:end], location=location))
                pos = end
                continue

            if char == "!":
                result = self._try_parse_image(text, pos, location)
            elif char == "[":
                result = self._try_parse_link(text, pos, location)
            else:
                result = self._try_parse_delimited(text, pos, location, depth)

            if result is None:
                tokens_append(Text(char, location=location))
                pos += 1
                continue

            node, pos = result
            tokens_append(node)

        return tuple(tokens)

    def _is_escaped(self, text: str, pos: int) -> bool:
        """Whether the character at ``pos`` follows a backslash.

        The backslash stays in the output; it only suppresses markup.
        """
        return pos > 0 and text[pos - 1] == ESCAPE_CHAR
