"""HTML renderer using StringBuilder pattern.

Walks a token tree once and emits HTML through a static tag mapping.
User content is emitted as written; there is no escaping.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. Multiple threads can safely share a single HtmlRenderer instance
and call render() concurrently without synchronization.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from pluma.errors import RenderError
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
from pluma.stringbuilder import StringBuilder
from pluma.utils.logger import get_logger, location_suffix

logger = get_logger(__name__)


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Created fresh for each render() call so concurrent renders sharing an
    HtmlRenderer never see each other's references.
    """

    references: Mapping[str, str] = field(default_factory=dict)
    unresolved: list[str] = field(default_factory=list)


class HtmlRenderer:
    """Render a token tree to HTML.

    Usage:
        >>> from pluma import parse
        >>> renderer = HtmlRenderer()
        >>> renderer.render(parse("# Hello **World**"))
        '<h1>Hello <strong>World</strong></h1>\\n'

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.
    """

    __slots__ = ("_text_transformer",)

    def __init__(
        self,
        *,
        text_transformer: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            text_transformer: Optional callback to transform plain text tokens
        """
        self._text_transformer = text_transformer

    def render(self, node: Document) -> str:
        """Render a document to an HTML string.

        Args:
            node: Document root

        Returns:
            HTML string

        Raises:
            RenderError: If the tree holds something that is not a token.
        """
        if not isinstance(node, Document):
            raise RenderError(node, "expected a Document")

        ctx = RenderContext(references=node.references)
        sb = StringBuilder()
        for child in node.children:
            self._render_block(child, sb, ctx)

        if ctx.unresolved:
            logger.debug(
                "Rendered %d unresolved reference(s) with empty targets: %s",
                len(ctx.unresolved),
                ", ".join(ctx.unresolved),
            )
        return sb.build()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render a block token."""
        match block:
            case Header(level=level, children=children):
                sb.append(f"<h{level}>")
                self._render_inlines(children, sb, ctx)
                sb.append_line(f"</h{level}>")
            case Paragraph(children=children):
                sb.append_line("<p>")
                self._render_inlines(children, sb, ctx)
                sb.append_line().append_line("</p>")
            case CodeBlock(text=text):
                sb.append_line("<pre><code>")
                sb.append_line(text)
                sb.append_line("</code></pre>")
            case Quote(children=children):
                sb.append_line("<blockquote><p>")
                self._render_inlines(children, sb, ctx)
                sb.append_line().append_line("</p></blockquote>")
            case UnorderedListBlock(items=items):
                sb.append_line("<ul>")
                for item in items:
                    self._render_list_item(item, sb, ctx)
                sb.append_line("</ul>")
            case OrderedListBlock(start=start, items=items):
                sb.append_line(f'<ol start="{start}">')
                for item in items:
                    self._render_list_item(item, sb, ctx)
                sb.append_line("</ol>")
            case OrderedList() | UnorderedList():
                # A lone item outside its block renders as a one-item list
                self._render_block(self._wrap_item(block), sb, ctx)
            case HorizontalRule():
                sb.append_line("<hr>")
            case Note():
                pass  # Consumed by reference resolution
            case _:
                raise RenderError(block)

    def _render_list_item(
        self, item: OrderedList | UnorderedList, sb: StringBuilder, ctx: RenderContext
    ) -> None:
        sb.append("<li>")
        self._render_inlines(item.children, sb, ctx)
        sb.append_line("</li>")

    @staticmethod
    def _wrap_item(item: OrderedList | UnorderedList) -> Block:
        if isinstance(item, OrderedList):
            return OrderedListBlock(item.order, item.marker, (item,), location=item.location)
        return UnorderedListBlock(item.marker, (item,), location=item.location)

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_inlines(
        self, children: tuple[Inline, ...], sb: StringBuilder, ctx: RenderContext
    ) -> None:
        for child in children:
            self._render_inline(child, sb, ctx)

    def _render_inline(self, node: Inline, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render an inline token."""
        match node:
            case Text(content=content):
                if self._text_transformer is not None:
                    content = self._text_transformer(content)
                sb.append(content)
            case Emphasis(children=children):
                sb.append("<em>")
                self._render_inlines(children, sb, ctx)
                sb.append("</em>")
            case Strong(children=children):
                sb.append("<strong>")
                self._render_inlines(children, sb, ctx)
                sb.append("</strong>")
            case CodeSpan(children=children):
                sb.append("<code>")
                self._render_inlines(children, sb, ctx)
                sb.append("</code>")
            case Link(label=label):
                sb.append(f'<a href="{self._target(node, ctx)}">{label}</a>')
            case Image(label=label):
                sb.append(f'<img src="{self._target(node, ctx)}" alt="{label}">')
            case LineBreak():
                sb.append("<br>")
            case _:
                raise RenderError(node)

    def _target(self, node: Link | Image, ctx: RenderContext) -> str:
        """Final target for a link or image, looking up references if needed."""
        if not node.via_reference:
            return node.target
        target = ctx.references.get(node.target)
        if target is None:
            ctx.unresolved.append(f"{node.target!r}{location_suffix(node.location)}")
            return ""
        return target
