"""List item classifier mixin."""

from pluma.parsing.charsets import (
    DIGITS,
    ORDERED_LIST_PUNCTUATION,
    UNORDERED_LIST_MARKERS,
)
from pluma.tokens import ClassifiedLine, LineKind


class ListClassifierMixin:
    """Mixin providing list item classification."""

    def _try_classify_list_item(self, line: str, lineno: int) -> ClassifiedLine | None:
        """Try to classify a line as a list item.

        Unordered items are ``-`` or ``*`` followed by one space; ordered
        items are a digit run followed by ``.`` or ``)`` and one space.
        Either way at least one character of content must follow.

        Args:
            line: The source line
            lineno: Line number (1-indexed)

        Returns:
            ClassifiedLine carrying the marker (and order for ordered items),
            or None.
        """
        if not line:
            return None

        # Unordered: "- x" or "* x"
        if line[0] in UNORDERED_LIST_MARKERS:
            if len(line) > 2 and line[1] == " ":
                return ClassifiedLine(
                    LineKind.LIST_ITEM,
                    line,
                    lineno,
                    content=line[2:],
                    marker=line[0],
                )
            return None

        # Ordered: "1. x" or "1) x"
        pos = 0
        while pos < len(line) and line[pos] in DIGITS:
            pos += 1
        if pos == 0:
            return None
        if (
            len(line) > pos + 2
            and line[pos] in ORDERED_LIST_PUNCTUATION
            and line[pos + 1] == " "
        ):
            return ClassifiedLine(
                LineKind.LIST_ITEM,
                line,
                lineno,
                content=line[pos + 2 :],
                marker=line[pos],
                order=line[:pos],
                ordered=True,
            )
        return None
