"""Line-driven tokenizer producing typed block tokens.

Splits the source into lines, asks the Lexer what each line starts, and
hands the line to the matching block constructor or accumulator. Block
tokens come out in source order.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `InlineParsingMixin`: Inline content (emphasis, code spans, links, images)
- `BlockParsingMixin`: Block constructors, accumulators, list grouping

Thread Safety:
- Parser produces immutable token trees (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share token trees across threads

"""

from __future__ import annotations

from pluma.config import ParseConfig, get_parse_config
from pluma.lexer import Lexer
from pluma.nodes import Block, Inline
from pluma.parsing import BlockParsingMixin, InlineParsingMixin
from pluma.tokens import LineKind
from pluma.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Line driver for the Pluma tokenizer.

    Usage:
        >>> parser = Parser("# Hello\n\nWorld")
        >>> blocks = parser.parse()
        >>> blocks[0]
        Header(level=1, children=(Text(content='Hello'),))

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_lexer",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: Markup source text
            source_file: Optional source file path recorded in locations

        """
        self._source = source
        self._source_file = source_file
        self._lexer = Lexer(source)

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    def parse(self) -> list[Block]:
        """Tokenize the whole source into block tokens.

        Blank lines are skipped. Each handler reports how many lines it
        consumed and the cursor moves past them.

        Returns:
            Block tokens in source order.
        """
        lines = self._lexer.lines
        blocks: list[Block] = []
        index = 0

        while index < len(lines):
            line = lines[index]
            if line == "":
                index += 1
                continue

            classified = self._lexer.classify(line, index + 1)
            match classified.kind:
                case LineKind.CODE_FENCE:
                    block, index = self._parse_code_fence(lines, index)
                    blocks.append(block)
                    continue
                case LineKind.QUOTE:
                    block, index = self._parse_quote(lines, index)
                    blocks.append(block)
                    continue
                case LineKind.LIST_ITEM:
                    self._append_list_item(blocks, self._parse_list_item(classified))
                case LineKind.HEADER:
                    blocks.append(self._parse_header(classified))
                case LineKind.NOTE:
                    blocks.append(self._parse_note(classified))
                case LineKind.HORIZONTAL_RULE:
                    blocks.append(self._parse_horizontal_rule(classified))
                case LineKind.PARAGRAPH:
                    blocks.append(self._parse_paragraph(classified))
            index += 1

        logger.debug(
            "Tokenized %d lines into %d blocks%s",
            len(lines),
            len(blocks),
            f" ({self._source_file})" if self._source_file else "",
        )
        return blocks

    def parse_inline(self, text: str) -> tuple[Inline, ...]:
        """Scan a single line of text into inline tokens.

        Args:
            text: Raw line text

        Returns:
            Inline tokens in source order.
        """
        return self._parse_inline(text)
