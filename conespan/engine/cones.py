"""Cone boundaries — the n directions splitting the plane into equal cones.

Every strategy emits the initial direction unchanged, followed by the other
n-1 boundaries in counterclockwise order, so consecutive rays (including the
last back to the first) are 2π/n apart.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sized
from typing import Any, Protocol

import numpy as np

from conespan.engine.kernels import FloatKernel, SympyKernel, supports_exact
from conespan.engine.registry import APPROXIMATE, EXACT, strategy
from conespan.errors import InvalidConeCount
from conespan.utils.direction import TWO_PI, Direction
from conespan.utils.polynomial import Polynomial, cone_polynomial

logger = logging.getLogger(__name__)


class DirectionSink(Protocol):
    def append(self, direction: Direction) -> None: ...


def validate_cone_number(cone_number: int) -> int:
    if isinstance(cone_number, bool) or not isinstance(cone_number, (int, np.integer)):
        raise TypeError(f"cone_number must be an integer, got {type(cone_number).__name__}")
    if cone_number < 2:
        raise InvalidConeCount(int(cone_number))
    return int(cone_number)


class ConeBoundaryComputer(ABC):
    """Shared contract of the cone-boundary strategies."""

    name: str = ""

    def __init__(self, kernel: Any) -> None:
        self.kernel = kernel

    def compute(self, cone_number: int, initial_direction: Direction) -> list[Direction]:
        """Return the ``cone_number`` boundary directions as a fresh list."""
        rays: list[Direction] = []
        self.write(cone_number, initial_direction, rays)
        return rays

    def write(self, cone_number: int, initial_direction: Direction, output: DirectionSink) -> int:
        """Append the boundary directions to ``output``.

        Returns the pass-the-end position: ``len(output)`` for sized sinks,
        otherwise the number of directions written.
        """
        cone_number = validate_cone_number(cone_number)
        start = time.perf_counter()

        written = 0
        for ray in self._boundaries(cone_number, initial_direction):
            output.append(ray)
            written += 1

        elapsed = (time.perf_counter() - start) * 1000
        logger.debug("%s: %d cone boundaries in %.1fms", self.name, written, elapsed)
        return len(output) if isinstance(output, Sized) else written

    @abstractmethod
    def _boundaries(self, cone_number: int, initial_direction: Direction) -> Iterator[Direction]:
        """Yield exactly ``cone_number`` directions, ``initial_direction`` first."""


@strategy(name=APPROXIMATE, description="Floating-point trigonometry, one cos/sin pair per ray")
class ApproximateConeBoundaries(ConeBoundaryComputer):
    """Fast inexact boundaries: rotate by cos/sin of i·2π/n."""

    name = APPROXIMATE

    def __init__(self, kernel: Any = None) -> None:
        kernel = kernel if kernel is not None else FloatKernel()
        if not callable(getattr(kernel, "cos_sin", None)):
            raise TypeError(f"{type(kernel).__name__} does not provide floating-point cos/sin")
        super().__init__(kernel)

    def _boundaries(self, cone_number: int, initial_direction: Direction) -> Iterator[Direction]:
        yield initial_direction

        # Angles come from the index, not a running sum, so rounding does not drift.
        cone_angle = TWO_PI / cone_number
        angles = np.arange(1, cone_number) * cone_angle
        cos_values, sin_values = self.kernel.cos_sin(angles)
        for cos_value, sin_value in zip(cos_values, sin_values):
            yield initial_direction.rotate(float(cos_value), float(sin_value))


@strategy(name=EXACT, description="Exact algebraic boundaries from polynomial root isolation")
class ExactConeBoundaries(ConeBoundaryComputer):
    """Exact boundaries: cosines are roots of the cone polynomial.

    The k-th smallest distinct root r_k of ``cone_polynomial(n)`` is
    -cos(2π(k-1)/n), so ranks 1..⌈n/2⌉ with a positive sine give the upper
    half-plane in counterclockwise order. Rank 1 is the identity and yields
    the initial direction itself. For even n the lower half is the antipodes
    of the upper half; for odd n it is ranks ⌈n/2⌉..2 again with a negative
    sine, which walks the angles in (π, 2π) upward.
    """

    name = EXACT

    def __init__(self, kernel: Any = None) -> None:
        kernel = kernel if kernel is not None else SympyKernel()
        if not supports_exact(kernel):
            raise TypeError(
                f"{type(kernel).__name__} lacks exact root isolation or exact square roots"
            )
        super().__init__(kernel)

    def _boundaries(self, cone_number: int, initial_direction: Direction) -> Iterator[Direction]:
        polynomial = cone_polynomial(cone_number)
        anchor = Direction(
            self.kernel.coerce(initial_direction.dx),
            self.kernel.coerce(initial_direction.dy),
        )

        half = (cone_number + 1) // 2
        is_even = cone_number % 2 == 0

        # Upper half, kept for the antipodal lower half when n is even
        ray_store: list[Direction] = []
        for rank in range(1, half + 1):
            if rank == 1:
                ray = initial_direction
            else:
                ray = self._rotate_by_root(anchor, polynomial, rank, upper=True)
            if is_even:
                ray_store.append(ray)
            yield ray

        if is_even:
            for ray in ray_store:
                yield -ray
        else:
            for rank in range(half, 1, -1):
                yield self._rotate_by_root(anchor, polynomial, rank, upper=False)

    def _rotate_by_root(
        self, anchor: Direction, polynomial: Polynomial, rank: int, upper: bool
    ) -> Direction:
        cos_value = -self.kernel.kth_smallest_root(polynomial, rank)
        sin_value = self.kernel.sqrt(1 - cos_value * cos_value)
        if not upper:
            sin_value = -sin_value
        return anchor.rotate(cos_value, sin_value)
