"""ASTRenderer protocol: the interface a token-tree renderer provides.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.
The built-in ``HtmlRenderer`` is the reference implementation.

Example:
    from pluma.renderers.protocol import ASTRenderer

    def render_page(renderer: ASTRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from pluma.nodes import Document


class ASTRenderer(Protocol):
    """Protocol for token-tree renderers."""

    def render(self, node: Document) -> str:
        """Render a Document to a string."""
        ...
