"""Header classifier mixin."""

from pluma.parsing.charsets import HEADER_MARKER, MAX_HEADER_LEVEL
from pluma.tokens import ClassifiedLine, LineKind


class HeadingClassifierMixin:
    """Mixin providing header classification."""

    def _try_classify_header(self, line: str, lineno: int) -> ClassifiedLine | None:
        """Try to classify a line as a header.

        Headers are 1-6 ``#`` characters, one space, then non-empty content.
        Seven or more ``#`` never form a header.

        Returns:
            ClassifiedLine with ``level`` and ``content``, or None.
        """
        level = 0
        while level < len(line) and line[level] == HEADER_MARKER:
            level += 1

        if level == 0 or level > MAX_HEADER_LEVEL:
            return None

        # Must be followed by a space and at least one character
        if len(line) <= level + 1 or line[level] != " ":
            return None

        return ClassifiedLine(
            LineKind.HEADER, line, lineno, content=line[level + 1 :], level=level
        )
