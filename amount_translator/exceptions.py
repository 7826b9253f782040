"""
Custom exception hierarchy for amount translation.

Each exception type maps to a specific category of failure, so callers
(CLI, API) can report a machine-readable code alongside the message.
"""

from __future__ import annotations


class AmountTranslationError(Exception):
    """Base exception for all amount translation failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class UnsupportedMagnitude(AmountTranslationError):
    """The integer part needs a scale word beyond Decillion."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_MAGNITUDE", message, details)


class InvalidAmountError(AmountTranslationError):
    """The input is not a finite decimal literal."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_AMOUNT", message, details)
