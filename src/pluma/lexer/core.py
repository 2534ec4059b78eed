"""Line classifier for Pluma.

Splits a document into lines and decides which block construct each line
starts. Classification is a pure function of the line: the parser owns the
cursor and decides how many lines a construct consumes.

No regex: each classifier scans its prefix by hand, so every line is
classified in time linear in its length.

Thread Safety:
Lexer instances hold only the immutable line list. Classification has no
side effects.

"""

from __future__ import annotations

from collections.abc import Iterator

from pluma.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    LinkRefClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    ThematicClassifierMixin,
)
from pluma.tokens import ClassifiedLine, LineKind


class Lexer(
    FenceClassifierMixin,
    QuoteClassifierMixin,
    ListClassifierMixin,
    HeadingClassifierMixin,
    LinkRefClassifierMixin,
    ThematicClassifierMixin,
):
    """Line classifier.

    Precedence (first match wins):
    1. Code fence (the line is exactly the fence marker)
    2. Quote (starts with ``>``)
    3. List item (``- x``, ``* x``, ``1. x``, ``1) x``)
    4. Header (``#`` through ``######``)
    5. Link reference definition (``[name]:target``)
    6. Horizontal rule (``---``, ``***``)
    7. Paragraph

    Usage:
        >>> lexer = Lexer("# Hello\n\nWorld")
        >>> for line in lexer.classify_lines():
        ...     print(line)
        ClassifiedLine(HEADER, '# Hello', line 1)
        ClassifiedLine(PARAGRAPH, 'World', line 3)

    """

    __slots__ = ("_lines",)

    def __init__(self, source: str = "") -> None:
        """Initialize lexer with source text.

        Args:
            source: Markup source text
        """
        self._lines = source.split("\n")

    @property
    def lines(self) -> list[str]:
        """Source split on newlines (blank lines included)."""
        return self._lines

    def classify(self, line: str, lineno: int = 0) -> ClassifiedLine:
        """Classify one non-blank line.

        Args:
            line: The line to classify (no trailing newline)
            lineno: Line number used for diagnostics (1-indexed)

        Returns:
            The ClassifiedLine for the highest-precedence construct that
            matches. Never fails: unmatched lines are paragraphs.
        """
        return (
            self._try_classify_code_fence(line, lineno)
            or self._try_classify_quote(line, lineno)
            or self._try_classify_list_item(line, lineno)
            or self._try_classify_header(line, lineno)
            or self._try_classify_link_reference_def(line, lineno)
            or self._try_classify_horizontal_rule(line, lineno)
            or ClassifiedLine(LineKind.PARAGRAPH, line, lineno, content=line)
        )

    def classify_lines(self) -> Iterator[ClassifiedLine]:
        """Classify every non-blank line independently.

        Lines inside a code fence are classified like any other line;
        use the parser to honor multi-line constructs.

        Yields:
            ClassifiedLine objects one at a time
        """
        for index, line in enumerate(self._lines):
            if line == "":
                continue
            yield self.classify(line, index + 1)
