"""Tests for the floating-point cone strategy."""

import math

import pytest

from conespan.engine.cones import ApproximateConeBoundaries
from conespan.engine.kernels import FloatKernel, SympyKernel
from conespan.utils.direction import Direction


def test_two_cones(approximate):
    rays = approximate.compute(2, Direction(1, 0))
    assert rays[0] == Direction(1, 0)
    assert rays[1].is_close(Direction(-1, 0))
    assert rays[1].dx == pytest.approx(-1.0)
    assert rays[1].dy == pytest.approx(0.0, abs=1e-15)


def test_four_cones(approximate):
    rays = approximate.compute(4, Direction(1, 0))
    expected = [Direction(1, 0), Direction(0, 1), Direction(-1, 0), Direction(0, -1)]
    for ray, want in zip(rays, expected):
        assert ray.is_close(want)


def test_three_cones(approximate):
    rays = approximate.compute(3, Direction(1, 0))
    assert rays[1].dx == pytest.approx(-0.5)
    assert rays[1].dy == pytest.approx(math.sqrt(3) / 2)
    assert rays[2].dx == pytest.approx(-0.5)
    assert rays[2].dy == pytest.approx(-math.sqrt(3) / 2)


def test_components_are_floats(approximate):
    for ray in approximate.compute(5, Direction(1, 2))[1:]:
        assert type(ray.dx) is float
        assert type(ray.dy) is float


def test_preserves_magnitude(approximate):
    for ray in approximate.compute(7, Direction(3, 4)):
        assert math.hypot(float(ray.dx), float(ray.dy)) == pytest.approx(5.0)


def test_no_drift_for_many_cones(approximate):
    n = 1000
    rays = approximate.compute(n, Direction(1, 0))
    # Ray n/2 is computed from its own angle, so it lands on -x to machine precision.
    assert rays[n // 2].dx == pytest.approx(-1.0, abs=1e-12)
    assert rays[n // 2].dy == pytest.approx(0.0, abs=1e-12)
    assert rays[-1].is_close(Direction.from_angle(-2 * math.pi / n))


def test_default_kernel_is_float():
    assert isinstance(ApproximateConeBoundaries().kernel, FloatKernel)


def test_rejects_kernel_without_trigonometry():
    with pytest.raises(TypeError, match="cos/sin"):
        ApproximateConeBoundaries(kernel=SympyKernel())
