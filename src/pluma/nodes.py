"""Typed token trees for Pluma.

All tokens are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: trees are built once and handed by value to the renderer
- Pattern matching: ``match`` statements dispatch on the variant

Node Hierarchy:
Node (base)
├── Block tokens
│   ├── Document (root handed to renderers)
│   ├── Header
│   ├── Paragraph
│   ├── CodeBlock
│   ├── Quote
│   ├── OrderedListBlock  ──> OrderedList items
│   ├── UnorderedListBlock ──> UnorderedList items
│   ├── Note (link-reference definition)
│   └── HorizontalRule
└── Inline tokens
    ├── Text
    ├── Emphasis
    ├── Strong
    ├── CodeSpan
    ├── Link
    ├── Image
    └── LineBreak

Every node accepts an optional keyword-only ``location``. It is excluded
from equality so two trees compare by structure alone.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal, TypeAlias

from pluma.location import SourceLocation

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tokens."""

    location: SourceLocation | None = field(
        default=None, kw_only=True, compare=False, repr=False
    )


# =============================================================================
# Inline Tokens
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal run of text, no further interpretation.

    Backslashes are kept as written; escaping only suppresses markup.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """Single-strength emphasis.

    Markup: *text* or _text_
    HTML: <em>text</em>

    """

    marker: Literal["*", "_"]
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """Double-strength emphasis.

    Markup: **text** or __text__
    HTML: <strong>text</strong>

    """

    marker: Literal["*", "_"]
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class CodeSpan(Node):
    """Backtick-delimited inline code.

    Markup: `code`
    HTML: <code>code</code>

    The contents are inline-scanned like any other span unless
    ``ParseConfig.literal_code_spans`` is set.

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markup: [label](url) or [label][name]
    HTML: <a href="url">label</a>

    When ``via_reference`` is true, ``target`` holds a reference name that
    still has to be looked up among the document's notes.

    """

    label: str
    target: str
    via_reference: bool = False


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image.

    Markup: ![label](url) or ![label][name]
    HTML: <img src="url" alt="label">

    """

    label: str
    target: str
    via_reference: bool = False


@dataclass(frozen=True, slots=True)
class LineBreak(Node):
    """Forced break between the lines of a quote.

    HTML: <br>

    """


# PEP 695 type alias for inline tokens
Inline: TypeAlias = Text | Emphasis | Strong | CodeSpan | Link | Image | LineBreak


# =============================================================================
# Block Tokens
# =============================================================================


@dataclass(frozen=True, slots=True)
class Header(Node):
    """ATX-style header.

    Markup: ## Title
    HTML: <h2>Title</h2>

    """

    level: Literal[1, 2, 3, 4, 5, 6]
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """One line of ordinary text."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block.

    ``text`` is the raw content between the fences joined with newlines.
    It is never inline-scanned.

    """

    text: str


@dataclass(frozen=True, slots=True)
class Quote(Node):
    """Block quote.

    Lines joined by hard breaks (two trailing spaces) are flattened into one
    inline sequence with a LineBreak between consecutive lines.

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class OrderedList(Node):
    """One ordered list item.

    ``order`` is the digit run written in the source (``"2"`` for ``2) x``).

    """

    order: str
    marker: Literal[".", ")"]
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class UnorderedList(Node):
    """One unordered list item."""

    marker: Literal["-", "*"]
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class OrderedListBlock(Node):
    """A run of ordered items sharing the same punctuation.

    HTML: <ol start="N"> with <li> children

    """

    start: str
    marker: Literal[".", ")"]
    items: tuple[OrderedList, ...]


@dataclass(frozen=True, slots=True)
class UnorderedListBlock(Node):
    """A run of unordered items sharing the same bullet.

    HTML: <ul> with <li> children

    """

    marker: Literal["-", "*"]
    items: tuple[UnorderedList, ...]


@dataclass(frozen=True, slots=True)
class Note(Node):
    """Link-reference definition.

    Markup: [name]:target

    Consumed by reference resolution; renders nothing.

    """

    name: str
    target: str


@dataclass(frozen=True, slots=True)
class HorizontalRule(Node):
    """Horizontal rule.

    Markup: --- or ***
    HTML: <hr>

    """


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node handed to renderers.

    ``references`` maps note names to targets for resolving
    ``via_reference`` links and images.

    """

    children: tuple[Block, ...]
    references: Mapping[str, str] = field(default_factory=dict, hash=False)


# PEP 695 type alias for block tokens
Block: TypeAlias = (
    Header
    | Paragraph
    | CodeBlock
    | Quote
    | OrderedListBlock
    | UnorderedListBlock
    | OrderedList
    | UnorderedList
    | Note
    | HorizontalRule
)
