"""Shamir (k, n) threshold secret sharing over a prime field.

generate_coefficients(k, p)       -> [a_0, ..., a_{k-1}]   a_0 is the secret
select_abscissas(n, p, mode)      -> [x_1, ..., x_n]       distinct and nonzero
generate_shares(coeffs, xs)       -> [(x_i, f(x_i)), ...]
reconstruct(shares, p)            -> f(0)

reconstruct() does not know k. Given fewer than k shares it still returns a
field element, just not the secret; pass ``threshold=`` to have it refuse.
"""
import bisect
import logging
from typing import NamedTuple

import params
from entropy import default_source
from errors import (
    ConfigurationError,
    InsufficientSharesError,
    InvalidAbscissaError,
    ThresholdExceedsShareCount,
    ZeroDenominatorError,
)
from field import FieldElement, PrimeField

logger = logging.getLogger(__name__)


class Share(NamedTuple):
    x: int
    y: int


def _field_of(values, modulus):
    if modulus is not None:
        return PrimeField(modulus)
    for value in values:
        if isinstance(value, FieldElement):
            return value.field
    raise ConfigurationError("A modulus is required when plain integers are given.")


def _as_elements(values, field):
    elements = []
    for value in values:
        if isinstance(value, FieldElement):
            if value.prime != field.prime:
                raise TypeError("Cannot operate on two numbers in different Fields.")
            elements.append(value)
        else:
            elements.append(field.element(value))
    return elements


def generate_coefficients(k, modulus, source=None, secret=None, bound=None):
    """Coefficients of a random polynomial of degree k-1 over GF(modulus).

    Coefficient 0 is the secret: *secret* reduced mod the modulus when given,
    otherwise a random element. Random coefficients are uniform in
    ``[0, bound)``, where *bound* defaults to the modulus.
    """
    field = PrimeField(modulus)
    if k < 1:
        raise ConfigurationError(f"Threshold must be at least 1, got {k}.")
    bound = field.prime if bound is None else bound
    if not 1 <= bound <= field.prime:
        raise ConfigurationError(
            f"Coefficient bound {bound} must be between 1 and the modulus."
        )
    source = source or default_source()

    logger.debug("Drawing %d coefficients below a %d-bit bound", k, bound.bit_length())
    if secret is None:
        a_0 = field.random_element(source, bound)
    else:
        a_0 = field.element(secret)
    return [a_0] + [field.random_element(source, bound) for _ in range(k - 1)]


def select_abscissas(n, modulus, mode=params.DEFAULT_MODE, source=None):
    """n distinct nonzero x-coordinates, either 1..n or drawn at random.

    In random mode each draw picks an index among the nonzero values not yet
    taken, so no draw is ever wasted on a collision. A source that never
    yields an acceptable index fails in the sampler after
    ``params.MAX_SAMPLE_ATTEMPTS`` draws.
    """
    field = PrimeField(modulus)
    if mode not in params.ABSCISSA_MODES:
        raise ConfigurationError(
            "{} is not one of the supported modes: {}".format(mode, list(params.ABSCISSA_MODES))
        )
    if n < 1:
        raise ConfigurationError(f"At least one share is required, got {n}.")
    if n > field.prime - 1:
        raise ConfigurationError(
            f"GF({field.prime}) has only {field.prime - 1} nonzero x-coordinates, {n} requested."
        )

    if mode == "sequential":
        return [field.element(i) for i in range(1, n + 1)]

    source = source or default_source()
    abscissas = []
    taken = []  # sorted
    for _ in range(n):
        free = field.prime - 1 - len(taken)
        x = source.randbelow(free) + 1
        # shift past every taken value at or below x to land on the x-th free one
        for t in taken:
            if t > x:
                break
            x += 1
        bisect.insort(taken, x)
        abscissas.append(field.element(x))
    return abscissas


def eval_poly(poly, x):
    """Evaluate polynomial at x. poly is list of coefficients [a_0, a_1, ..., a_d]."""
    result = FieldElement(0, x.prime)
    for i, coeff in enumerate(poly):
        result = result + coeff * x ** i
    return result


def generate_shares(coefficients, abscissas, modulus=None):
    """Evaluate the polynomial at every abscissa.

    Coefficients and abscissas are FieldElements or, with *modulus*, plain
    ints. The threshold is the number of coefficients and must not exceed the
    number of abscissas.
    """
    coefficients = list(coefficients)
    abscissas = list(abscissas)
    if len(coefficients) > len(abscissas):
        raise ThresholdExceedsShareCount(len(coefficients), len(abscissas))
    if not coefficients:
        raise ConfigurationError("At least one coefficient is required.")

    field = _field_of(coefficients + abscissas, modulus)
    poly = _as_elements(coefficients, field)
    xs = _as_elements(abscissas, field)

    seen = set()
    for x in xs:
        if x.is_zero():
            raise InvalidAbscissaError("x = 0 would hand out the secret itself.")
        if x in seen:
            raise InvalidAbscissaError(f"x = {x.num} is used more than once.")
        seen.add(x)

    logger.debug("Generating %d shares with threshold %d", len(xs), len(poly))
    return [Share(x.num, eval_poly(poly, x).num) for x in xs]


def lagrange_interpolate(x, x_s, y_s, p):
    """Lagrange interpolation at point x. x_s and y_s are lists of x,y pairs."""
    field = PrimeField(p)
    x = field.reduce(x)
    x_s = [field.reduce(v) for v in x_s]
    y_s = [field.reduce(v) for v in y_s]

    total = 0
    k = len(x_s)
    for i in range(k):
        xi, yi = x_s[i], y_s[i]
        li = 1
        for j in range(k):
            if i == j:
                continue
            xj = x_s[j]
            try:
                denom_inv = field.inv(field.sub(xi, xj))
            except ZeroDenominatorError:
                raise ZeroDenominatorError(
                    f"Shares {i} and {j} have the same x-coordinate {xi} mod {p}"
                ) from None
            li = field.mul(li, field.mul(field.sub(x, xj), denom_inv))
        total = field.add(total, field.mul(yi, li))
    return total


def reconstruct(shares, modulus, threshold=None):
    """Recover the secret (polynomial at x=0) from a set of shares.

    With *threshold* set, fewer shares than that raise
    InsufficientSharesError instead of producing an unrelated value.
    """
    shares = list(shares)
    if threshold is not None and len(shares) < threshold:
        raise InsufficientSharesError(len(shares), threshold)
    if not shares:
        raise InsufficientSharesError(0, threshold or 1)

    logger.debug("Reconstructing from %d shares", len(shares))
    x_s, y_s = zip(*shares)
    return lagrange_interpolate(0, x_s, y_s, modulus)


def split_secret(secret, threshold, num_shares, modulus,
                 mode=params.DEFAULT_MODE, source=None):
    """Generate num_shares shares of secret, any threshold of which recover it."""
    if threshold > num_shares:
        raise ThresholdExceedsShareCount(threshold, num_shares)
    source = source or default_source()

    coefficients = generate_coefficients(threshold, modulus, source, secret=secret)
    try:
        abscissas = select_abscissas(num_shares, modulus, mode, source)
        return generate_shares(coefficients, abscissas)
    finally:
        coefficients.clear()
