"""
Pluma: a lightweight markup to HTML tokenizer.

Splits text into typed block tokens (headers, paragraphs, code fences,
quotes, lists, rules, link notes), scans each block for inline markup
(emphasis, strong, code spans, links, images, breaks) and renders the
resulting tree to HTML. Zero runtime dependencies.

Quick Start:
    >>> from pluma import parse, render
    >>> doc = parse("# Hello, World!")
    >>> print(render(doc))
    <h1>Hello, World!</h1>

    >>> # Or use the high-level Markdown class
    >>> from pluma import Markdown
    >>> md = Markdown()
    >>> html = md("Some *emphasis* and a [link][home]\\n[home]:/index")

"""

from pluma.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from pluma.errors import PlumaError, RenderError
from pluma.lexer import Lexer
from pluma.location import SourceLocation
from pluma.nodes import (
    Block,
    CodeBlock,
    CodeSpan,
    Document,
    Emphasis,
    Header,
    HorizontalRule,
    Image,
    Inline,
    LineBreak,
    Link,
    Node,
    Note,
    OrderedList,
    OrderedListBlock,
    Paragraph,
    Quote,
    Strong,
    Text,
    UnorderedList,
    UnorderedListBlock,
)
from pluma.parser import Parser
from pluma.references import collect_references, resolve_references
from pluma.renderers.html import HtmlRenderer
from pluma.renderers.protocol import ASTRenderer
from pluma.serialization import from_dict, from_json, to_dict, to_json
from pluma.tokens import ClassifiedLine, LineKind
from pluma.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def tokenize(source: str) -> list[Block]:
    """Split source into block tokens without building a Document.

    Reference links are left unresolved.

    Example:
        >>> tokenize("---")
        [HorizontalRule()]

    """
    return Parser(source).parse()


def scan_inline(text: str) -> tuple[Inline, ...]:
    """Scan one line of text into inline tokens.

    Example:
        >>> scan_inline("*hi*")
        (Emphasis(marker='*', children=(Text(content='hi'),)),)

    """
    return Parser(text).parse_inline(text)


def classify_line(line: str) -> ClassifiedLine:
    """Report which block construct a single line starts."""
    return Lexer().classify(line)


def parse(source: str, *, source_file: str | None = None) -> Document:
    """Parse source into a Document.

    Uses the parse configuration active in the current context.

    Args:
        source: Markup source text
        source_file: Optional source file path recorded in token locations

    Returns:
        Document whose ``references`` holds every note, last definition winning

    Example:
        >>> doc = parse("# Hello **World**")
        >>> doc.children[0].level
        1

    """
    blocks = Parser(source, source_file=source_file).parse()
    loc = SourceLocation(
        lineno=1,
        col_offset=1,
        end_lineno=max(source.count("\n") + 1, 1),
        source_file=source_file,
    )
    return Document(
        tuple(blocks),
        collect_references(blocks),
        location=loc,
    )


def render(doc: Document) -> str:
    """Render a Document to HTML.

    The ``text_transformer`` of the active parse configuration, if any, is
    applied to every text token.

    Example:
        >>> print(render(parse("---")))
        <hr>

    """
    renderer = HtmlRenderer(text_transformer=get_parse_config().text_transformer)
    return renderer.render(doc)


class Markdown:
    """High-level processor combining tokenizer, resolution and renderer.

    Usage:
        >>> md = Markdown()
        >>> md("# Hello **World**")
        '<h1>Hello <strong>World</strong></h1>\\n'

        >>> # Access the token tree
        >>> doc = md.parse("# Heading")
        >>> doc.children[0].level
        1

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        Markdown instances concurrently from different threads.

    """

    __slots__ = ("_config",)

    def __init__(self, config: ParseConfig | None = None) -> None:
        """Initialize Markdown processor.

        Args:
            config: Parse configuration used for every call (defaults if None)

        """
        self._config = config or ParseConfig()

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse, resolve and render in one call."""
        return self.render(resolve_references(self.parse(source)))

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Parse source into a Document under this instance's configuration."""
        with parse_config_context(self._config):
            return parse(source, source_file=source_file)

    def render(self, doc: Document) -> str:
        """Render a Document under this instance's configuration."""
        with parse_config_context(self._config):
            return render(doc)


__all__ = [
    # High-level API
    "Markdown",
    "parse",
    "tokenize",
    "scan_inline",
    "classify_line",
    "resolve_references",
    "collect_references",
    "render",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Low-level
    "Lexer",
    "Parser",
    "LineKind",
    "ClassifiedLine",
    "HtmlRenderer",
    "ASTRenderer",
    "SourceLocation",
    # Errors
    "PlumaError",
    "RenderError",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Visitor
    "BaseVisitor",
    "transform",
    # Nodes
    "Node",
    "Block",
    "Inline",
    "Document",
    "Header",
    "Paragraph",
    "CodeBlock",
    "Quote",
    "OrderedList",
    "UnorderedList",
    "OrderedListBlock",
    "UnorderedListBlock",
    "Note",
    "HorizontalRule",
    "Text",
    "Emphasis",
    "Strong",
    "CodeSpan",
    "Link",
    "Image",
    "LineBreak",
]
