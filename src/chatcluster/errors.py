"""Summary: Error types raised at the ChatCluster boundary.

Importance: Separates malformed input from output encoding failures.
Alternatives: Return error strings instead of raising exceptions.
"""

from __future__ import annotations


class ChatClusterError(Exception):
    """Base error for ChatCluster failures."""


class ParseError(ChatClusterError):
    """Summary: Raised when input does not match the message-array shape.

    Importance: Lets callers report bad payloads without inspecting pydantic errors.
    Alternatives: Let validation errors propagate unchanged.
    """

    def __init__(self, cause: object) -> None:
        super().__init__(f"Parse error: {cause}")


class SerializationError(ChatClusterError):
    """Raised when a result cannot be encoded to the wire shape."""

    def __init__(self, cause: object) -> None:
        super().__init__(f"Serialization error: {cause}")
