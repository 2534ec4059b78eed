"""ContextVar-based parse configuration for Pluma.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Markdown instance, read by the parser and renderer
running in the same context.

Usage:
    # In Markdown class
    md = Markdown(config=ParseConfig(literal_code_spans=True))
    html = md("`*kept*`")  # Sets config internally via ContextVar

    # Direct parser usage
    from pluma.config import parse_config_context, ParseConfig

    with parse_config_context(ParseConfig(max_inline_depth=8)):
        blocks = Parser(source).parse()

"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

DEFAULT_MAX_INLINE_DEPTH = 64


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        max_inline_depth: Nesting depth at which the inline scanner stops
            recursing into emphasis/strong/code spans. Deeper content is kept
            as a single literal Text token.
        literal_code_spans: Keep code span contents as one Text token instead
            of inline-scanning them.
        text_transformer: Optional callback applied to Text content when
            rendering.

    """

    max_inline_depth: int = DEFAULT_MAX_INLINE_DEPTH
    literal_code_spans: bool = False
    text_transformer: Callable[[str], str] | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "literal_code_spans": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.literal_code_spans
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "pluma_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(literal_code_spans=True)):
        ...     blocks = Parser("`*a*`").parse()
        >>> # Previous config is active again

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "DEFAULT_MAX_INLINE_DEPTH",
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
