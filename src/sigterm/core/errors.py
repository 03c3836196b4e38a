"""Exception hierarchy for sigterm.

All package exceptions inherit from SignalError, enabling callers to catch
broad (SignalError) or narrow (ParseError).
"""

from __future__ import annotations


class SignalError(Exception):
    """Base exception for all sigterm errors."""


class ParseError(SignalError, ValueError):
    """Raised when text does not name a termination signal.

    Subclasses ValueError so Pydantic validators report it as a normal
    validation failure.

    Attributes:
        text: The offending input, verbatim.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"unknown termination signal: {text}")
