"""Contract tests shared by both cone strategies."""

import math
from collections import deque

import pytest

from conespan.errors import InvalidConeCount
from conespan.utils.direction import Direction, ccw_angle
from tests.conftest import CONE_NUMBERS, INITIAL_DIRECTIONS


@pytest.mark.parametrize("n", CONE_NUMBERS)
@pytest.mark.parametrize("d", INITIAL_DIRECTIONS, ids=str)
def test_returns_n_directions(computer, n, d):
    assert len(computer.compute(n, d)) == n


@pytest.mark.parametrize("n", CONE_NUMBERS)
@pytest.mark.parametrize("d", INITIAL_DIRECTIONS, ids=str)
def test_first_direction_is_initial(computer, n, d):
    rays = computer.compute(n, d)
    assert rays[0] is d


@pytest.mark.parametrize("n", CONE_NUMBERS)
@pytest.mark.parametrize("d", INITIAL_DIRECTIONS, ids=str)
def test_consecutive_rays_are_one_cone_apart(computer, n, d):
    rays = computer.compute(n, d)
    cone_angle = 2 * math.pi / n
    for i in range(n):
        swept = ccw_angle(rays[i], rays[(i + 1) % n])
        assert swept == pytest.approx(cone_angle, abs=1e-9)


@pytest.mark.parametrize("n", [n for n in CONE_NUMBERS if n % 2 == 0])
@pytest.mark.parametrize("d", INITIAL_DIRECTIONS, ids=str)
def test_even_second_half_is_antipodal(computer, n, d):
    rays = computer.compute(n, d)
    half = n // 2
    for i in range(half):
        assert rays[i + half].is_close(-rays[i])


@pytest.mark.parametrize("n", [1, 0, -3])
def test_too_few_cones_rejected(computer, n):
    with pytest.raises(InvalidConeCount):
        computer.compute(n, Direction(1, 0))


def test_invalid_cone_count_is_value_error(computer):
    with pytest.raises(ValueError, match="larger than 1"):
        computer.compute(1, Direction(1, 0))


@pytest.mark.parametrize("n", [2.0, "4", True])
def test_non_integer_cone_number_rejected(computer, n):
    with pytest.raises(TypeError):
        computer.compute(n, Direction(1, 0))


def test_write_appends_and_returns_end(computer):
    output = [Direction(7, 7)]
    end = computer.write(4, Direction(1, 0), output)
    assert end == 5
    assert len(output) == 5
    assert output[0] == Direction(7, 7)
    assert output[1] == Direction(1, 0)


def test_write_accepts_any_appendable_sink(computer):
    output = deque()
    assert computer.write(3, Direction(0, 1), output) == 3
    assert output[0] == Direction(0, 1)


def test_invalid_count_writes_nothing(computer):
    output = []
    with pytest.raises(InvalidConeCount):
        computer.write(1, Direction(1, 0), output)
    assert output == []


def test_results_are_fresh_lists(computer):
    first = computer.compute(4, Direction(1, 0))
    second = computer.compute(4, Direction(1, 0))
    assert first is not second
    first.clear()
    assert len(second) == 4
