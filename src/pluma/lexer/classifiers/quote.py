"""Block quote classifier mixin."""

from pluma.parsing.charsets import QUOTE_MARKER
from pluma.tokens import ClassifiedLine, LineKind


class QuoteClassifierMixin:
    """Mixin providing block quote classification."""

    def _try_classify_quote(self, line: str, lineno: int) -> ClassifiedLine | None:
        """Classify a line starting with ``>``.

        Only the marker itself is stripped; a following space stays part
        of the content.
        """
        if not line.startswith(QUOTE_MARKER):
            return None
        return ClassifiedLine(
            LineKind.QUOTE, line, lineno, content=line[len(QUOTE_MARKER) :]
        )
