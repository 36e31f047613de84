"""Direction value type and the 2D rotation primitive. No engine imports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

# Components are plain floats for the approximate path and SymPy expressions
# for the exact one; only ring operations are used on them here.
Number = Any

TWO_PI = 2 * np.pi

# Unit-vector tolerance for float comparisons of directions.
_DIRECTION_TOL = 1e-9


@dataclass(frozen=True)
class Direction:
    """Orientation of the vector (dx, dy). Magnitude is irrelevant.

    Equality (``==``) is component-wise, which is what the cone computers
    guarantee for the anchor and for antipodal pairs. Use :meth:`is_close`
    to compare directions that differ only by scale or rounding.
    """

    dx: Number
    dy: Number

    def __post_init__(self) -> None:
        if self.dx == 0 and self.dy == 0:
            raise ValueError("Direction requires a non-zero vector")

    @classmethod
    def from_angle(cls, theta: float) -> Direction:
        return cls(float(np.cos(theta)), float(np.sin(theta)))

    def rotate(self, cos_value: Number, sin_value: Number) -> Direction:
        """Apply the counterclockwise rotation [[cos, -sin], [sin, cos]]."""
        return Direction(
            cos_value * self.dx - sin_value * self.dy,
            sin_value * self.dx + cos_value * self.dy,
        )

    def __neg__(self) -> Direction:
        return Direction(-self.dx, -self.dy)

    def to_vector(self) -> NDArray[np.float64]:
        return np.array([float(self.dx), float(self.dy)], dtype=np.float64)

    def unit_vector(self) -> NDArray[np.float64]:
        v = self.to_vector()
        return v / np.linalg.norm(v)

    def angle(self) -> float:
        """Polar angle in [0, 2π)."""
        vx, vy = self.to_vector()
        return float(np.arctan2(vy, vx) % TWO_PI)

    def is_close(self, other: Direction, tol: float = _DIRECTION_TOL) -> bool:
        """True if both directions point the same way, up to ``tol``."""
        return bool(np.allclose(self.unit_vector(), other.unit_vector(), rtol=0.0, atol=tol))

    def __str__(self) -> str:
        return f"{self.dx} {self.dy}"


def ccw_angle(start: Direction, end: Direction) -> float:
    """Counterclockwise angle swept from ``start`` to ``end``, in [0, 2π)."""
    delta = (end.angle() - start.angle()) % TWO_PI
    # Wrap a full turn caused by rounding back to zero.
    if TWO_PI - delta < _DIRECTION_TOL:
        return 0.0
    return float(delta)
