"""Character sets and markers shared by the lexer and parser.

All sets are frozensets for O(1) membership testing and are defined once at
import time; nothing here is ever mutated.

Usage:
    from pluma.parsing.charsets import INLINE_TRIGGERS

    if char in INLINE_TRIGGERS:  # O(1) lookup
        ...
"""

# Characters that may start an inline construct
INLINE_TRIGGERS: frozenset[str] = frozenset("_*`[!")

# Emphasis / strong delimiter characters
EMPHASIS_MARKERS: frozenset[str] = frozenset("*_")

# Code span delimiter (never doubled into strong)
CODE_MARKER = "`"

# Suppresses interpretation of the trigger that follows it
ESCAPE_CHAR = "\\"

# Block markers
FENCE_MARKER = "```"
QUOTE_MARKER = ">"
HEADER_MARKER = "#"
MAX_HEADER_LEVEL = 6

# A quote line ending in this suffix continues onto the next line
HARD_BREAK_SUFFIX = "  "

# List marker characters
UNORDERED_LIST_MARKERS: frozenset[str] = frozenset("-*")
ORDERED_LIST_PUNCTUATION: frozenset[str] = frozenset(".)")

# Horizontal rule characters (3+ of the same one)
HORIZONTAL_RULE_CHARS: frozenset[str] = frozenset("-*")
MIN_HORIZONTAL_RULE_LENGTH = 3

# Digits for ordered list detection
DIGITS: frozenset[str] = frozenset("0123456789")
