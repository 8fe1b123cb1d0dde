import math
import random

import pytest

from meshview.mathutil import (
    INFINITY,
    PI,
    clamp,
    degrees_to_radians,
    random_double,
    random_int,
)


def test_degrees_to_radians_full_turn_matches_pi():
    assert degrees_to_radians(360) == pytest.approx(2 * PI)
    assert degrees_to_radians(360) == pytest.approx(2 * math.pi)


def test_clamp_handles_infinity():
    assert clamp(INFINITY, 0.0, 1.0) == 1.0
    assert clamp(-INFINITY, 0.0, 1.0) == 0.0


def test_degrees_to_radians_half_turn():
    assert degrees_to_radians(180) == pytest.approx(math.pi)


def test_degrees_to_radians_zero():
    assert degrees_to_radians(0) == 0.0


def test_degrees_to_radians_is_linear():
    assert degrees_to_radians(90) * 2 == pytest.approx(degrees_to_radians(180))


@pytest.mark.parametrize(
    "x, low, high, expected",
    [
        (-5.0, 0.0, 1.0, 0.0),
        (5.0, 0.0, 1.0, 1.0),
        (0.25, 0.0, 1.0, 0.25),
        (0.0, 0.0, 1.0, 0.0),
        (1.0, 0.0, 1.0, 1.0),
    ],
)
def test_clamp(x, low, high, expected):
    assert clamp(x, low, high) == expected


def test_random_double_default_range():
    random.seed(1)
    values = [random_double() for _ in range(500)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_random_double_custom_range():
    random.seed(2)
    values = [random_double(-3.0, 7.0) for _ in range(500)]
    assert all(-3.0 <= v < 7.0 for v in values)
    assert min(values) < 0.0 < max(values)


def test_random_int_inclusive_bounds():
    random.seed(3)
    values = {random_int(1, 4) for _ in range(1000)}
    assert values == {1, 2, 3, 4}


def test_random_int_single_value():
    random.seed(4)
    assert {random_int(5, 5) for _ in range(50)} == {5}