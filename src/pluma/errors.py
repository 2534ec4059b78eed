"""Exception classes for Pluma.

Tokenizing never raises: malformed markup degrades to a lower-precedence
construct. The exceptions here signal misuse of the API.
"""

from __future__ import annotations


class PlumaError(Exception):
    """Base exception for all Pluma errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(PlumaError):
    """Error during HTML rendering.

    Raised when the renderer is handed an object that is not a token
    it knows how to render.
    """

    def __init__(self, node: object, message: str = "cannot render node") -> None:
        """Initialize render error.

        Args:
            node: The offending object
            message: Description of the error
        """
        self.node = node
        location = getattr(node, "location", None)
        prefix = f"{location} " if location is not None else ""
        super().__init__(f"{prefix}{message}: {type(node).__name__}")
