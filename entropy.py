import logging

from Crypto.Random import get_random_bytes

import params
from errors import RandomSourceFailure

logger = logging.getLogger(__name__)


class RandomSource:
    """Byte source used for coefficients and random x-coordinates.

    *read* is any callable taking a byte count and returning that many bytes.
    The default is pycryptodome's CSPRNG; tests pass a seeded
    ``random.Random(seed).randbytes`` instead.
    """

    def __init__(self, read=get_random_bytes, max_attempts=params.MAX_SAMPLE_ATTEMPTS):
        self._read = read
        self.max_attempts = max_attempts

    def read(self, nbytes):
        try:
            data = self._read(nbytes)
        except Exception as exc:
            raise RandomSourceFailure(f"Could not read {nbytes} bytes: {exc}") from exc
        if data is None or len(data) != nbytes:
            got = 0 if data is None else len(data)
            raise RandomSourceFailure(f"Expected {nbytes} bytes, got {got}")
        return data

    def randbelow(self, bound):
        """Uniform integer in ``[0, bound)`` by rejection sampling.

        Draws ``bound.bit_length()`` bits at a time and discards values
        ``>= bound``, so no value is favoured over another.
        """
        if bound < 1:
            raise ValueError(f"bound must be positive, got {bound}")
        if bound == 1:
            return 0
        bits = (bound - 1).bit_length()
        nbytes = (bits + 7) // 8
        excess = nbytes * 8 - bits
        for _ in range(self.max_attempts):
            value = int.from_bytes(self.read(nbytes), "big") >> excess
            if value < bound:
                return value
        logger.warning("Rejection sampling gave up after %d draws", self.max_attempts)
        raise RandomSourceFailure(
            f"No value below the bound after {self.max_attempts} draws"
        )


def default_source():
    return RandomSource()
