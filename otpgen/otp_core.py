#!/usr/bin/env python3
"""
otp_core.py — Core library for HOTP / TOTP password generation.

Three stateless steps, composed by the caller in this order:

1. validate()          : is (factor, digits) a sane OTP configuration?
2. resolve_counter()   : explicit counter, or floor(time / period)
3. generate_password() : HMAC + RFC 4226 dynamic truncation + zero padding

Goals:
- Pure functions only: no file I/O, no logging, no cached codes.
- The secret is raw bytes owned by the caller; it is only read.
- HMAC comes from the standard `hmac` / `hashlib` modules.
"""

import base64
import binascii
import hmac
import math
import struct

from .errors import InvalidDigits, InvalidPeriod, InvalidTime
from .types import UINT64_LIMIT, Algorithm, Counter, Factor, Timer

# --- Config / constants ----------------------------------------------------
DEFAULT_DIGITS = 6          # standard: 6 digits
DEFAULT_TIME_STEP = 30      # TOTP step (seconds)
MIN_SANE_DIGITS = 6         # validate() range
MAX_SANE_DIGITS = 8
MIN_DIGITS = 1              # generate_password() hard range
MAX_DIGITS = 9              # 10 digits overflows an unsigned 32-bit value
MAX_PERIOD = 300


# --- Validation ------------------------------------------------------------
def validate(factor: Factor, secret: bytes, algorithm: Algorithm, digits: int) -> bool:
    """
    Check that a generator configuration is sane.

    - digits must be within 6..8
    - Timer factors also need 0 < period <= 300
    - secret and algorithm are accepted as given

    Returns a bool instead of raising: this is an advisory pre-check.
    """
    if not MIN_SANE_DIGITS <= digits <= MAX_SANE_DIGITS:
        return False
    if isinstance(factor, Timer):
        return 0 < factor.period <= MAX_PERIOD
    return isinstance(factor, Counter)


# --- Counter resolution ----------------------------------------------------
def _not_finite(value) -> bool:
    # ints are always finite, and may be too large for math.isfinite()
    return isinstance(value, float) and not math.isfinite(value)


def resolve_counter(factor: Factor, at_time: float) -> int:
    """
    Derive the 64-bit counter fed to the HMAC.

    Arguments:
        factor: Counter(value) or Timer(period)
        at_time: seconds since the Unix epoch (ignored for Counter)

    Raises:
        InvalidTime: at_time is negative, not finite, or too large for 64 bits
        InvalidPeriod: period is zero, negative or NaN
        TypeError: factor is neither Counter nor Timer
    """
    if isinstance(factor, Counter):
        return factor.value
    if isinstance(factor, Timer):
        if _not_finite(at_time) or at_time < 0:
            raise InvalidTime()
        if factor.period != factor.period or factor.period <= 0:  # NaN
            raise InvalidPeriod()
        if isinstance(at_time, int) and isinstance(factor.period, int):
            steps = at_time // factor.period
        else:
            steps = math.floor(at_time / factor.period)
        if steps >= UINT64_LIMIT:
            raise InvalidTime("Timestamp is too large for a 64-bit counter")
        return int(steps)
    raise TypeError(f"Unsupported factor: {factor!r}")


# --- RFC helpers -----------------------------------------------------------
def int_to_bytes(i: int) -> bytes:
    """HMAC message for a counter: always 8 bytes, most significant byte first."""
    try:
        return struct.pack(">Q", i)
    except struct.error as e:
        raise ValueError("Counter value must fit in an unsigned 64-bit integer") from e


def dynamic_truncate(hmac_digest: bytes) -> int:
    """
    Apply RFC 4226 dynamic truncation.

    - offset = last_byte & 0x0F (0..15, always in bounds for >= 20-byte digests)
    - read 4 bytes from offset as a big-endian unsigned 32-bit integer
    - clear the most significant bit
    """
    offset = hmac_digest[-1] & 0x0F
    (code,) = struct.unpack(">I", hmac_digest[offset:offset + 4])
    return code & 0x7FFFFFFF


def padded(text: str, length: int, character: str = "0") -> str:
    """Left-pad text to length. Longer strings come back unchanged."""
    padding = length - len(text)
    if padding <= 0:
        return text
    return character * padding + text


def generate_password(algorithm: Algorithm, digits: int, secret: bytes, counter: int) -> str:
    """
    Generate an HOTP value (RFC 4226).

    Steps:
    1. Message = 8-byte counter (big-endian)
    2. HMAC-<algorithm>(key=secret, msg=message)
    3. Dynamic truncate -> 31-bit integer
    4. otp = dbc % 10^digits
    5. Zero-pad to exactly "digits" characters

    Raises:
        InvalidDigits: if digits is outside 1..9
    """
    if not MIN_DIGITS <= digits <= MAX_DIGITS:
        raise InvalidDigits()

    msg = int_to_bytes(counter)
    digest = hmac.new(secret, msg, algorithm.hash_name).digest()

    dbc = dynamic_truncate(digest)
    otp_val = dbc % (10 ** digits)
    return padded(str(otp_val), digits)


# --- Secret decoding (CLI / API edge) -------------------------------------
def decode_base32_secret(secret_b32: str) -> bytes:
    """
    Decode a Base32 secret as shown by authenticator apps.

    Case-insensitive; spaces are ignored and missing '=' padding is restored.

    Raises:
        ValueError: if the secret is not valid Base32
    """
    cleaned = secret_b32.replace(" ", "").strip()
    cleaned += "=" * (-len(cleaned) % 8)
    try:
        return base64.b32decode(cleaned, casefold=True)
    except binascii.Error as e:
        raise ValueError("Invalid Base32 secret") from e
