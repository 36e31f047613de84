"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest

from conespan.engine.cones import ApproximateConeBoundaries, ExactConeBoundaries
from conespan.engine.kernels import SympyKernel
from conespan.utils.direction import Direction


# Cone numbers exercised by the property tests: both parities, small and medium.
CONE_NUMBERS = [2, 3, 4, 5, 6, 7, 8, 9, 12]

INITIAL_DIRECTIONS = [
    Direction(1, 0),
    Direction(0, 1),
    Direction(-3, 4),
    Direction(2.5, -1.0),
]


class ScriptedOracle:
    """Stand-in exact kernel returning known roots of the cone polynomial.

    The cone polynomial of degree n has distinct roots -cos(2πj/n) for
    j = 0..n//2; ranks are answered from that table and recorded in ``calls``.
    """

    def __init__(self) -> None:
        self.calls: list[int] = []

    def coerce(self, value):
        return float(value)

    def kth_smallest_root(self, polynomial, k):
        self.calls.append(k)
        n = polynomial.degree
        roots = sorted(-math.cos(2 * math.pi * j / n) for j in range(n // 2 + 1))
        return roots[k - 1]

    def sqrt(self, value):
        return math.sqrt(max(value, 0.0))


@pytest.fixture
def approximate() -> ApproximateConeBoundaries:
    return ApproximateConeBoundaries()


@pytest.fixture
def exact() -> ExactConeBoundaries:
    return ExactConeBoundaries(kernel=SympyKernel())


@pytest.fixture
def scripted_oracle() -> ScriptedOracle:
    return ScriptedOracle()


@pytest.fixture(params=["approximate", "exact"])
def computer(request, approximate, exact):
    """Both strategies, for contract tests that must hold for either."""
    return approximate if request.param == "approximate" else exact
