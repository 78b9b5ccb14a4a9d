"""
otpgen package
==============

HOTP / TOTP password generation per RFC 4226 & RFC 6238.

Pipeline (all functions are pure):

    validate(factor, secret, algorithm, digits)       -> bool
    resolve_counter(factor, at_time)                  -> int
    generate_password(algorithm, digits, secret, ctr) -> str

Quick example
-------------
>>> from otpgen import Algorithm, Timer, resolve_counter, generate_password
>>> counter = resolve_counter(Timer(30), 59)
>>> generate_password(Algorithm.SHA1, 8, b"12345678901234567890", counter)
'94287082'
"""

from .errors import (
    ErrorKind,
    GenerationError,
    InvalidDigits,
    InvalidGenerator,
    InvalidPeriod,
    InvalidTime,
)
from .generator import Generator
from .otp_core import (
    DEFAULT_DIGITS,
    DEFAULT_TIME_STEP,
    decode_base32_secret,
    dynamic_truncate,
    generate_password,
    int_to_bytes,
    padded,
    resolve_counter,
    validate,
)
from .types import Algorithm, Counter, Factor, Timer

__all__ = [
    "Algorithm",
    "Counter",
    "DEFAULT_DIGITS",
    "DEFAULT_TIME_STEP",
    "ErrorKind",
    "Factor",
    "GenerationError",
    "Generator",
    "InvalidDigits",
    "InvalidGenerator",
    "InvalidPeriod",
    "InvalidTime",
    "Timer",
    "decode_base32_secret",
    "dynamic_truncate",
    "generate_password",
    "int_to_bytes",
    "padded",
    "resolve_counter",
    "validate",
]
