"""Code fence classifier mixin."""

from pluma.parsing.charsets import FENCE_MARKER
from pluma.tokens import ClassifiedLine, LineKind


class FenceClassifierMixin:
    """Mixin providing code fence classification."""

    def _try_classify_code_fence(self, line: str, lineno: int) -> ClassifiedLine | None:
        """Classify a line consisting of exactly the fence marker.

        Info strings are not supported: ```` ```python ```` is not a fence.
        """
        if line != FENCE_MARKER:
            return None
        return ClassifiedLine(LineKind.CODE_FENCE, line, lineno)
