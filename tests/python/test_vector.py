from __future__ import annotations

import math
import random

import pytest

from flocksim.sim.core.vector import Vector2, add, random_unit, scale, sub


def test_magnitude_and_set_magnitude():
    vector = Vector2(3, 4)
    assert vector.magnitude() == 5

    result = vector.set_magnitude(10)

    assert result is vector
    assert vector.x == pytest.approx(6)
    assert vector.y == pytest.approx(8)


def test_mutating_methods_chain_and_return_receiver():
    vector = Vector2(1, 2)
    result = vector.add(Vector2(1, 1)).sub(Vector2(0, 1)).mult(3).div(2)

    assert result is vector
    assert vector == Vector2(3.0, 3.0)


def test_division_and_normalization_by_zero_are_noops():
    vector = Vector2(2, -3)
    vector.div(0)
    assert vector == Vector2(2, -3)

    zero = Vector2()
    zero.normalize()
    zero.set_magnitude(5)
    assert zero == Vector2(0, 0)
    assert all(math.isfinite(value) for value in (zero.x, zero.y))


def test_limit_clamps_only_when_longer():
    long_vector = Vector2(30, 40).limit(5)
    assert long_vector.x == pytest.approx(3)
    assert long_vector.y == pytest.approx(4)

    short_vector = Vector2(0.3, 0.4).limit(5)
    assert short_vector == Vector2(0.3, 0.4)


def test_distance_helpers():
    a = Vector2(1, 1)
    b = Vector2(4, 5)
    assert a.distance(b) == pytest.approx(5)
    assert a.distance_squared(b) == pytest.approx(25)


def test_copy_is_independent():
    original = Vector2(1, 2)
    clone = original.copy()
    clone.x = 10
    assert original.x == 1


def test_pure_helpers_leave_operands_untouched():
    a = Vector2(1, 2)
    b = Vector2(3, 5)

    assert add(a, b) == Vector2(4, 7)
    assert sub(b, a) == Vector2(2, 3)
    assert scale(a, 2) == Vector2(2, 4)
    assert a == Vector2(1, 2)
    assert b == Vector2(3, 5)


def test_random_unit_has_unit_length():
    rng = random.Random(7)
    for _ in range(50):
        assert random_unit(rng).magnitude() == pytest.approx(1.0)
    assert random_unit().magnitude() == pytest.approx(1.0)


def test_heading_matches_atan2():
    assert Vector2(0, 2).heading() == pytest.approx(math.pi / 2)
    assert Vector2(-1, 0).heading() == pytest.approx(math.pi)
