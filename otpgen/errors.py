"""
errors.py — failure kinds raised by the OTP core.

Each concrete error carries an ``ErrorKind`` so callers can either catch
the class or switch on ``err.kind``.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    INVALID_TIME = "invalid_time"
    INVALID_PERIOD = "invalid_period"
    INVALID_DIGITS = "invalid_digits"


class GenerationError(ValueError):
    """Base class for recoverable failures of counter resolution / password generation."""

    kind: ErrorKind
    default_message = "OTP generation failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class InvalidTime(GenerationError):
    kind = ErrorKind.INVALID_TIME
    default_message = "Timestamp must be a non-negative number of seconds"


class InvalidPeriod(GenerationError):
    kind = ErrorKind.INVALID_PERIOD
    default_message = "Period must be greater than zero"


class InvalidDigits(GenerationError):
    kind = ErrorKind.INVALID_DIGITS
    default_message = "Digits must be between 1 and 9"


class InvalidGenerator(ValueError):
    """Raised when a Generator is built from a configuration that fails validate()."""
