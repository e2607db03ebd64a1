"""Errors raised while reading wire-format content."""

from typing import Any


class FormatError(ValueError):
    """
    Raised when a JSON-compatible value does not match any known wire shape.

    Attributes:
        source (Any): The offending value, kept for diagnostics.
    """

    def __init__(self, message: str, source: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source

    def __str__(self) -> str:
        return f"{self.message}: {self.source!r}"
