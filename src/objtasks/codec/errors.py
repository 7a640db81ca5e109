"""Codec error types."""
from __future__ import annotations


class CodecError(Exception):
    """Base error for all codec failures."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class SerializationError(CodecError):
    """Raised when a value cannot be represented as JSON text."""


class ParseError(CodecError):
    """Raised when text is not well-formed JSON."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        position: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column
        self.position = position
