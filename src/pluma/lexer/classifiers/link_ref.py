"""Link reference definition classifier mixin.

A definition occupies a whole line: ``[name]:target``. Whitespace around
the target is ignored; the name is taken verbatim.
"""

from pluma.tokens import ClassifiedLine, LineKind


class LinkRefClassifierMixin:
    """Mixin providing link reference definition classification."""

    def _try_classify_link_reference_def(
        self, line: str, lineno: int
    ) -> ClassifiedLine | None:
        """Try to classify a line as a link reference definition.

        Returns:
            ClassifiedLine with ``name`` and ``target``, or None when the
            name is empty, the colon does not immediately follow ``]``, or
            no target is given.
        """
        if not line.startswith("["):
            return None

        close = line.find("]", 1)
        if close <= 1:
            return None

        if close + 1 >= len(line) or line[close + 1] != ":":
            return None

        target = line[close + 2 :].strip()
        if not target:
            return None

        return ClassifiedLine(
            LineKind.NOTE, line, lineno, name=line[1:close], target=target
        )
