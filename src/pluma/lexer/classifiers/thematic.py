"""Horizontal rule classifier mixin."""

from pluma.parsing.charsets import HORIZONTAL_RULE_CHARS, MIN_HORIZONTAL_RULE_LENGTH
from pluma.tokens import ClassifiedLine, LineKind


class ThematicClassifierMixin:
    """Mixin providing horizontal rule classification."""

    def _try_classify_horizontal_rule(
        self, line: str, lineno: int
    ) -> ClassifiedLine | None:
        """Classify a line made only of 3+ ``-`` or 3+ ``*``.

        Spaces between the characters are not allowed, nor is mixing them.
        """
        if len(line) < MIN_HORIZONTAL_RULE_LENGTH:
            return None

        char = line[0]
        if char not in HORIZONTAL_RULE_CHARS:
            return None

        if line.count(char) != len(line):
            return None

        return ClassifiedLine(LineKind.HORIZONTAL_RULE, line, lineno)
