"""Exception types for the project."""

from __future__ import annotations


class EpochTimeError(Exception):
    """Base exception for date/time conversion errors."""


class ParseError(EpochTimeError, ValueError):
    """Raised when a date string does not match its pattern.

    Also raised for malformed compact (yyyyMMddHHmmss) strings.
    """

    def __init__(self, message: str, *, text: str | None = None, pattern: str | None = None) -> None:
        super().__init__(message)
        self.text = text
        self.pattern = pattern


class PatternError(EpochTimeError, ValueError):
    """Raised when a format pattern uses an unsupported letter."""


class InvalidTimezoneError(EpochTimeError, ValueError):
    """Raised for an unknown timezone id when strict resolution is enabled."""


class InvalidFieldError(EpochTimeError, ValueError):
    """Raised for out-of-range civil fields when strict validation is requested."""


class EpochRangeError(EpochTimeError, ValueError):
    """Raised for an epoch value whose instant falls outside years 1-9999."""
