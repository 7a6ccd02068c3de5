import math

import pytest

from basicgames.vector2 import Vector2


def test_default_is_origin():
    assert Vector2() == Vector2(0.0, 0.0)


def test_length_of_three_four_triangle():
    assert Vector2(3.0, 4.0).length() == pytest.approx(5.0)


def test_length_sq_matches_dot_with_self():
    v = Vector2(2.5, -1.5)
    assert v.length_sq() == pytest.approx(v.dot(v))
    assert v.length() == pytest.approx(math.sqrt(v.length_sq()))


def test_normalized_has_unit_length_and_same_direction():
    v = Vector2(7.0, -2.0)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.dot(v) == pytest.approx(v.length())


def test_normalizing_zero_vector_raises():
    with pytest.raises(ValueError):
        Vector2().normalized()


def test_add_then_subtract_round_trip():
    a = Vector2(1.5, 2.0)
    b = Vector2(-4.0, 8.25)
    assert (a + b) - b == a


def test_scalar_multiplication_both_sides():
    v = Vector2(1.25, -3.0)
    assert 2 * v == v * 2
    assert v * 2 == v + v


def test_dot_of_perpendicular_vectors_is_zero():
    assert Vector2(1.0, 0.0).dot(Vector2(0.0, 5.0)) == 0


def test_lerp_endpoints_and_midpoint():
    a = Vector2(0.0, 10.0)
    b = Vector2(20.0, 30.0)
    assert a.lerp(b, 0) == a
    assert a.lerp(b, 1) == b
    mid = a.lerp(b, 0.5)
    assert (mid - a).length() == pytest.approx((b - mid).length())


def test_vectors_are_immutable():
    v = Vector2(1.0, 2.0)
    with pytest.raises(AttributeError):
        v.x = 5.0  # type: ignore[misc]
    assert v == Vector2(1.0, 2.0)
    assert v.length_sq() == pytest.approx(5.0)


def test_multiplying_by_vector_is_rejected():
    with pytest.raises(TypeError):
        Vector2(1.0, 1.0) * Vector2(1.0, 1.0)  # type: ignore[operator]