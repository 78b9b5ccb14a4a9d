"""
types.py — value types shared by the OTP core.

- Algorithm: HMAC hash selector (SHA1 / SHA256 / SHA512)
- Counter / Timer: the two variants of a Factor
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

UINT64_LIMIT = 2 ** 64


class Algorithm(Enum):
    SHA1 = ("sha1", 20)
    SHA256 = ("sha256", 32)
    SHA512 = ("sha512", 64)

    def __init__(self, hash_name: str, digest_size: int):
        self.hash_name = hash_name
        self.digest_size = digest_size

    @classmethod
    def from_name(cls, name: str) -> "Algorithm":
        """
        Parse an algorithm name such as "SHA1", "sha-256" or "Sha512".

        Raises:
            ValueError: for names outside SHA1/SHA256/SHA512
        """
        key = name.replace("-", "").upper()
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unsupported algorithm: {name}") from None


@dataclass(frozen=True)
class Counter:
    """Explicit HOTP counter (unsigned 64-bit)."""

    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Counter value must be an integer")
        if not 0 <= self.value < UINT64_LIMIT:
            raise ValueError("Counter value must fit in an unsigned 64-bit integer")


@dataclass(frozen=True)
class Timer:
    """TOTP time step in seconds. Range checks live in validate() / resolve_counter()."""

    period: float


Factor = Union[Counter, Timer]
