"""Line classification for the Pluma tokenizer.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (mixin composition + precedence)
└── classifiers/         # One mixin per block construct
    ├── fence.py         # Code fence
    ├── quote.py         # Block quote
    ├── list.py          # List items
    ├── heading.py       # Headers
    ├── link_ref.py      # Link reference definitions
    └── thematic.py      # Horizontal rules

Usage:
    >>> from pluma.lexer import Lexer
    >>> Lexer().classify("- item").kind
    <LineKind.LIST_ITEM: 3>

"""

from pluma.lexer.core import Lexer

__all__ = ["Lexer"]
