import os
from dataclasses import dataclass
from typing import Union

from Crypto.PublicKey import ECC
from sympy import isprime

from errors import ConfigurationError, ThresholdExceedsShareCount

# === Global Parameters ===
DEFAULT_PRIME = 2**256 - 2**32 - 977  # secp256k1 field prime
DEFAULT_THRESHOLD = 3
DEFAULT_NUM_SHARES = 5

ABSCISSA_MODES = ("sequential", "random")
DEFAULT_MODE = "sequential"

# Draws per sampled value before the source is declared broken; a healthy
# source has each draw rejected with probability below 1/2
MAX_SAMPLE_ATTEMPTS = 128

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

NAMED_PRIMES = {
    "p257": 257,
    "mersenne-127": 2**127 - 1,
    "mersenne-521": 2**521 - 1,
    "secp256k1": DEFAULT_PRIME,
}
CURVE_PRIMES = ['P-192', 'P-224', 'P-256', 'P-384', 'P-521']


def curve_prime(curve):
    """Field prime of one of pycryptodome's NIST curves."""
    return int(ECC._curves[curve].p)


def supported_primes():
    return list(NAMED_PRIMES) + CURVE_PRIMES


def parse_int(value):
    """Decimal, or hex/octal/binary with a 0x/0o/0b prefix."""
    try:
        return int(value, 0)
    except ValueError:
        return int(value, 10)


def resolve_prime(value):
    """Turn a prime name, decimal or 0x-prefixed string, or int into an int."""
    if isinstance(value, int):
        return value
    if value in NAMED_PRIMES:
        return NAMED_PRIMES[value]
    if value in CURVE_PRIMES:
        return curve_prime(value)
    try:
        return parse_int(value)
    except ValueError:
        raise ConfigurationError(
            "{} is not a number or one of the named primes: {}".format(
                value, supported_primes()
            )
        ) from None


@dataclass
class SharingSetup:
    threshold: int = DEFAULT_THRESHOLD
    """Number of shares needed to reconstruct the secret."""
    num_shares: int = DEFAULT_NUM_SHARES
    """Number of shares handed out."""
    prime: Union[int, str] = DEFAULT_PRIME
    """The field modulus, or the name of a known prime."""
    mode: str = DEFAULT_MODE
    """How share x-coordinates are chosen."""
    check_prime: bool = False
    """Verify the modulus with sympy before use."""

    def generate_sharing_setup(self):
        """Validate the parameters and return a setup with an integer prime."""
        if self.threshold < 1:
            raise ConfigurationError("Threshold must be at least 1.")
        if self.threshold > self.num_shares:
            raise ThresholdExceedsShareCount(self.threshold, self.num_shares)
        if self.mode not in ABSCISSA_MODES:
            raise ConfigurationError(
                "{} is not one of the supported modes: {}".format(
                    self.mode, list(ABSCISSA_MODES)
                )
            )
        prime = resolve_prime(self.prime)
        if prime < 2:
            raise ConfigurationError(f"Modulus {prime} is too small.")
        if self.check_prime and not isprime(prime):
            raise ConfigurationError(f"Modulus {prime} is not prime.")
        if self.num_shares >= prime:
            raise ConfigurationError(
                f"A field of size {prime} has fewer than {self.num_shares} nonzero x-coordinates."
            )
        return SharingSetup(
            self.threshold, self.num_shares, prime, self.mode,
            self.check_prime,
        )

    @staticmethod
    def supported_modes():
        return list(ABSCISSA_MODES)
