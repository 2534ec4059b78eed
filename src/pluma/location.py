"""Source location tracking for block tokens.

Provides SourceLocation dataclass for tracking which source lines produced
a token. The tokenizer works line by line, so locations are line-granular.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for debugging and diagnostics.

    Line numbers are 1-indexed. Multi-line constructs (code fences, quotes)
    record the last consumed line in ``end_lineno``.

    Attributes:
        lineno: First source line of the construct (1-indexed)
        col_offset: Starting column (1-indexed)
        end_lineno: Last source line consumed (optional)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=1)
            >>> str(loc)
            '3:1'

            >>> loc = SourceLocation(1, 1, 4, "notes.md")
            >>> str(loc)
            'notes.md:1:1'

    """

    lineno: int
    col_offset: int = 1
    end_lineno: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location as ``file:line:col`` or ``line:col``."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def span_to(self, end_lineno: int) -> SourceLocation:
        """Return a copy of this location ending on ``end_lineno``."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            end_lineno=end_lineno,
            source_file=self.source_file,
        )
