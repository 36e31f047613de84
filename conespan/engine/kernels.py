"""Numeric kernels — the arithmetic each cone strategy runs on.

FloatKernel is plain IEEE doubles via numpy. SympyKernel is an exact field of
algebraic numbers whose root-isolation oracle returns the k-th smallest real
root of an integer polynomial.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Protocol, runtime_checkable

import numpy as np
import sympy as sp

from conespan.errors import RootIsolationFailure
from conespan.utils.polynomial import Polynomial

logger = logging.getLogger(__name__)

_X = sp.Symbol("x")

# Square-free parts are reused across every rank query of one cone number.
_SQUAREFREE_CACHE_SIZE = 64


@runtime_checkable
class ExactKernel(Protocol):
    """Capabilities required by the exact cone strategy."""

    def coerce(self, value: Any) -> Any: ...

    def kth_smallest_root(self, polynomial: Polynomial, k: int) -> Any: ...

    def sqrt(self, value: Any) -> Any: ...


def supports_exact(kernel: object) -> bool:
    """Capability check used for strategy selection."""
    return isinstance(kernel, ExactKernel)


def to_sympy(polynomial: Polynomial) -> sp.Poly:
    return sp.Poly(list(reversed(polynomial.coefficients)), _X, domain="ZZ")


@lru_cache(maxsize=_SQUAREFREE_CACHE_SIZE)
def squarefree_part(polynomial: Polynomial) -> tuple[sp.Poly, int]:
    """Square-free part of ``polynomial`` and its number of distinct real roots.

    Interior cone roots are double roots, so ranks are taken over this part.
    """
    squarefree = to_sympy(polynomial).sqf_part()
    return squarefree, squarefree.count_roots()


class FloatKernel:
    """Double-precision trigonometry."""

    name = "float"

    def coerce(self, value: Any) -> float:
        return float(value)

    def cos_sin(self, angles: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        return np.cos(angles), np.sin(angles)


class SympyKernel:
    """Exact algebraic numbers backed by SymPy."""

    name = "sympy"

    def coerce(self, value: Any) -> sp.Expr:
        """Lift a component into the exact field. Floats become rationals."""
        if isinstance(value, sp.Basic):
            return value
        if isinstance(value, (int, np.integer)):
            return sp.Integer(int(value))
        return sp.nsimplify(value, rational=True)

    def kth_smallest_root(self, polynomial: Polynomial, k: int) -> sp.Expr:
        """Exact k-th smallest distinct real root (k is 1-based)."""
        if polynomial.degree < 1:
            raise RootIsolationFailure(f"Cannot isolate roots of constant polynomial {polynomial}")

        squarefree, count = squarefree_part(polynomial)
        if not 1 <= k <= count:
            raise RootIsolationFailure(
                f"Root rank {k} out of range: polynomial has {count} distinct real roots"
            )

        # CRootOf orders real roots first, ascending.
        root = sp.CRootOf(squarefree, k - 1)
        logger.debug("Isolated root %d of %d: %s", k, count, root)
        return root

    def sqrt(self, value: sp.Expr) -> sp.Expr:
        return sp.sqrt(value)
