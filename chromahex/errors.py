"""Errors raised by chromahex."""

from typing import Any


class HexParseError(ValueError):
    """
    Raised when a string is not a valid hex color.

    Attributes:
        text: The rejected input, as given by the caller.
        reason: Short human-readable explanation.
    """

    def __init__(self, text: Any, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid hex color {text!r}: {reason}")
