"""Integer polynomials and the cone polynomial builder. No engine imports."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Union

logger = logging.getLogger(__name__)

# Cone polynomials are rebuilt per cone number; repeated calls hit the cache.
_POLYNOMIAL_CACHE_SIZE = 64


@dataclass(frozen=True)
class Polynomial:
    """Immutable polynomial with integer coefficients, lowest degree first."""

    coefficients: tuple[int, ...]

    def __post_init__(self) -> None:
        coeffs = tuple(_as_integer(c) for c in self.coefficients) or (0,)
        # Strip leading zeros so that degree is well defined.
        while len(coeffs) > 1 and coeffs[-1] == 0:
            coeffs = coeffs[:-1]
        object.__setattr__(self, "coefficients", coeffs)

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    @property
    def leading_coefficient(self) -> int:
        return self.coefficients[-1]

    def __call__(self, x: Any) -> Any:
        """Horner evaluation; works for ints, floats and SymPy values."""
        result: Any = 0
        for c in reversed(self.coefficients):
            result = result * x + c
        return result

    def __add__(self, other: Union[Polynomial, int]) -> Polynomial:
        other = _as_polynomial(other)
        size = max(len(self.coefficients), len(other.coefficients))
        a = self.coefficients + (0,) * (size - len(self.coefficients))
        b = other.coefficients + (0,) * (size - len(other.coefficients))
        return Polynomial(tuple(x + y for x, y in zip(a, b)))

    __radd__ = __add__

    def __neg__(self) -> Polynomial:
        return Polynomial(tuple(-c for c in self.coefficients))

    def __sub__(self, other: Union[Polynomial, int]) -> Polynomial:
        return self + (-_as_polynomial(other))

    def __rsub__(self, other: int) -> Polynomial:
        return _as_polynomial(other) - self

    def __mul__(self, other: Union[Polynomial, int]) -> Polynomial:
        other = _as_polynomial(other)
        product = [0] * (len(self.coefficients) + len(other.coefficients) - 1)
        for i, a in enumerate(self.coefficients):
            if a == 0:
                continue
            for j, b in enumerate(other.coefficients):
                product[i + j] += a * b
        return Polynomial(tuple(product))

    __rmul__ = __mul__

    def __str__(self) -> str:
        terms = [f"{c}*x^{i}" for i, c in enumerate(self.coefficients) if c != 0]
        return " + ".join(reversed(terms)) if terms else "0"


def _as_integer(value: Any) -> int:
    try:
        as_int = int(value)
    except (TypeError, ValueError):
        raise TypeError(f"Polynomial coefficients must be integers, got {value!r}") from None
    if as_int != value:
        raise ValueError(f"Polynomial coefficient {value!r} is not integral")
    return as_int


def _as_polynomial(value: Union[Polynomial, int]) -> Polynomial:
    if isinstance(value, Polynomial):
        return value
    return Polynomial((value,))


@lru_cache(maxsize=_POLYNOMIAL_CACHE_SIZE)
def cone_polynomial(cone_number: int) -> Polynomial:
    """Polynomial whose distinct real roots are -cos(2πj/n), j = 0..⌊n/2⌋.

    Runs the Chebyshev recurrence a = 1, b = x, c = 2x·b − a up to degree n
    and returns b − 1, with the formal variable x standing for the negated
    indeterminate. Under that substitution the k-th smallest root gives the
    cosine of the (k−1)-th cone angle, so ascending root rank walks the cone
    boundaries counterclockwise from the initial direction.
    """
    if cone_number < 1:
        raise ValueError(f"cone_number must be positive, got {cone_number}")

    x = Polynomial((0, -1))
    double_x = 2 * x
    a, b = Polynomial((1,)), x
    for _ in range(2, cone_number + 1):
        a, b = b, double_x * b - a

    poly = b - 1
    logger.debug("Built cone polynomial for n=%d (degree %d)", cone_number, poly.degree)
    return poly
