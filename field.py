from errors import ZeroDenominatorError


def modinv(a, p):
    """Modular inverse using Extended Euclidean Algorithm."""
    a %= p
    if a == 0:
        raise ZeroDenominatorError(f"No inverse for 0 modulo {p}")
    lm, hm = 1, 0
    low, high = a, p
    while low > 1:
        r = high // low
        nm, new = hm - lm * r, high - low * r
        lm, low, hm, high = nm, new, lm, low
    return lm % p


class PrimeField:
    """Arithmetic in the integers modulo a prime.

    Every result is reduced into ``[0, prime)``. The prime is trusted: the
    field never checks primality, but a modulus below 2 has no usable
    elements and is rejected.
    """

    def __init__(self, prime):
        prime = int(prime)
        if prime < 2:
            raise ZeroDenominatorError(f"Degenerate modulus {prime}")
        self.prime = prime

    def __eq__(self, other):
        return isinstance(other, PrimeField) and self.prime == other.prime

    def __hash__(self):
        return hash(("PrimeField", self.prime))

    def __repr__(self):
        return f"PrimeField({self.prime})"

    def reduce(self, a):
        return int(a) % self.prime

    def add(self, a, b):
        return (a + b) % self.prime

    def sub(self, a, b):
        return (a - b) % self.prime

    def mul(self, a, b):
        return (a * b) % self.prime

    def neg(self, a):
        return -a % self.prime

    def pow(self, a, exp):
        return pow(a, exp, self.prime)

    def inv(self, a):
        return modinv(a, self.prime)

    def element(self, num):
        return FieldElement(self.reduce(num), self.prime)

    def random_element(self, source, bound=None, nonzero=False):
        """Uniform element of ``[0, bound)``, or ``[1, bound)`` if *nonzero*.

        *source* is an :class:`entropy.RandomSource`; *bound* defaults to the
        modulus and may not exceed it.
        """
        bound = self.prime if bound is None else bound
        if nonzero:
            return FieldElement(source.randbelow(bound - 1) + 1, self.prime)
        return FieldElement(source.randbelow(bound), self.prime)


class FieldElement:
    def __init__(self, num, prime):
        if num >= prime or num < 0:
            raise ValueError(f"Num {num} not in field range 0 to {prime - 1}")
        self.num = num
        self.prime = prime

    @property
    def field(self):
        return PrimeField(self.prime)

    def __eq__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.num == other.num and self.prime == other.prime

    def __hash__(self):
        return hash((self.num, self.prime))

    def __add__(self, other):
        self._check_field(other)
        return FieldElement((self.num + other.num) % self.prime, self.prime)

    def __mul__(self, other):
        self._check_field(other)
        return FieldElement((self.num * other.num) % self.prime, self.prime)

    def __pow__(self, exp):
        return FieldElement(pow(self.num, exp, self.prime), self.prime)

    def is_zero(self):
        return self.num == 0

    def _check_field(self, other):
        if not isinstance(other, FieldElement) or self.prime != other.prime:
            raise TypeError("Cannot operate on two numbers in different Fields.")

    def __repr__(self):
        return f"FieldElement_{self.prime}({self.num})"
