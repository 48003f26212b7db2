"""
Error taxonomy for the statblock transcoder.

Every failure that aborts a conversion is a ``StatblockError`` carrying a
user-facing message. The type-string soft degrade is not an error and never
raises.
"""

from __future__ import annotations

from typing import Any


class StatblockError(Exception):
    """Base exception for all conversion failures.

    Attributes:
        message: Human-readable error message
        details: Optional dictionary of additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ReadError(StatblockError):
    """Raised when the input file is missing or cannot be read."""


class ParseError(StatblockError):
    """Raised when the input text is not valid JSON."""


class SchemaError(StatblockError):
    """Raised when the JSON is valid but does not have the creature shape.

    Attributes:
        errors: One entry per offending field, e.g. ``"AC.Value: Input should be a valid integer"``
    """

    def __init__(
        self,
        message: str,
        errors: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.errors = errors or []

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        return self.message + "\n" + "\n".join(f"  - {e}" for e in self.errors)
