"""Line classification results produced by the Pluma lexer.

The lexer looks at one source line at a time and reports which block
construct the line starts. The parser dispatches on ``ClassifiedLine.kind``.

Thread Safety:
ClassifiedLine is frozen (immutable) and safe to share across threads.
LineKind is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class LineKind(Enum):
    """Block constructs a line can start, in classification precedence order."""

    CODE_FENCE = auto()  # ```
    QUOTE = auto()  # >text
    LIST_ITEM = auto()  # - x, * x, 1. x, 1) x
    HEADER = auto()  # # Title
    NOTE = auto()  # [name]:target
    HORIZONTAL_RULE = auto()  # --- or ***
    PARAGRAPH = auto()  # anything else


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """A source line tagged with the construct it starts.

    Only the attributes relevant to ``kind`` are populated.

    Attributes:
        kind: The construct this line starts
        line: The raw line as it appeared in the source
        lineno: Line number (1-indexed)
        content: Text following the construct's prefix (list items, headers)
        marker: List marker character (``-``/``*`` or ``.``/``)``)
        order: Digit run of an ordered list item
        ordered: Whether a list item is ordered
        level: Header level (1-6)
        name: Note name
        target: Note target

    """

    kind: LineKind
    line: str
    lineno: int = 0
    content: str = ""
    marker: str = ""
    order: str = ""
    ordered: bool = False
    level: int = 0
    name: str = ""
    target: str = ""

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.line
        if len(val) > 20:
            val = val[:17] + "..."
        return f"ClassifiedLine({self.kind.name}, {val!r}, line {self.lineno})"
