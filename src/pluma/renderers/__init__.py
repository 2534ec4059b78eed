"""Pluma renderers.

Renderers turn a token tree into an output format.

Available Renderers:
- HtmlRenderer: Renders tokens to HTML using StringBuilder pattern

"""

from pluma.renderers.html import HtmlRenderer
from pluma.renderers.protocol import ASTRenderer

__all__ = ["ASTRenderer", "HtmlRenderer"]
