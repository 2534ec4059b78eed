"""Logging helpers for Pluma.

Every Pluma logger lives under the ``pluma`` namespace. The package logger
carries only a NullHandler; applications attach real handlers.

Example:
    >>> from pluma.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing document")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pluma.location import SourceLocation

ROOT_LOGGER_NAME = "pluma"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the ``pluma`` namespace.

    Names outside the namespace are prefixed, so ``"mymodule"`` becomes
    ``"pluma.mymodule"`` while ``"pluma.parser"`` is kept as is.

    Example:
        >>> get_logger("mymodule").name
        'pluma.mymodule'
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}.")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def location_suffix(location: SourceLocation | None) -> str:
    """Format ``location`` for the end of a log message.

    Returns ``" at notes.md:3:1"`` style text, or ``""`` when the token
    has no location.
    """
    if location is None:
        return ""
    return f" at {location}"
