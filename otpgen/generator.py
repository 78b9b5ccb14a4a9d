"""
generator.py — Generator value object.

Bundles a factor, secret, algorithm and digit count that passed
validate(), and composes resolve_counter() + generate_password().
"""

from dataclasses import dataclass, field, replace

from .errors import InvalidGenerator
from .otp_core import DEFAULT_DIGITS, generate_password, resolve_counter, validate
from .types import Algorithm, Counter, Factor


@dataclass(frozen=True)
class Generator:
    factor: Factor
    secret: bytes = field(repr=False)
    algorithm: Algorithm = Algorithm.SHA1
    digits: int = DEFAULT_DIGITS

    def __post_init__(self):
        if not validate(self.factor, self.secret, self.algorithm, self.digits):
            raise InvalidGenerator(
                f"Invalid generator configuration: factor={self.factor!r}, digits={self.digits}"
            )

    def counter_at(self, timestamp: float) -> int:
        return resolve_counter(self.factor, timestamp)

    def password_at(self, timestamp: float) -> str:
        """
        Password for the given Unix timestamp.

        Counter-based generators ignore the timestamp. Raises InvalidTime
        for negative timestamps on time-based generators.
        """
        counter = self.counter_at(timestamp)
        return generate_password(self.algorithm, self.digits, self.secret, counter)

    def successor(self) -> "Generator":
        """Next generator in sequence: counter + 1 for HOTP, unchanged for TOTP."""
        if isinstance(self.factor, Counter):
            return replace(self, factor=Counter(self.factor.value + 1))
        return self
