"""Block-level line classifiers for the Pluma lexer.

Each classifier is a mixin that decides whether one line starts a
particular block construct. Classifiers are pure: they inspect the line
and return a ClassifiedLine or None, never consuming input.
"""

from pluma.lexer.classifiers.fence import (
    FenceClassifierMixin,
)
from pluma.lexer.classifiers.heading import (
    HeadingClassifierMixin,
)
from pluma.lexer.classifiers.link_ref import (
    LinkRefClassifierMixin,
)
from pluma.lexer.classifiers.list import (
    ListClassifierMixin,
)
from pluma.lexer.classifiers.quote import (
    QuoteClassifierMixin,
)
from pluma.lexer.classifiers.thematic import (
    ThematicClassifierMixin,
)

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "LinkRefClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
    "ThematicClassifierMixin",
]
