import math

import pytest

from lifeboids.boids.vector import Vector2D, deg_to_rad, rad_to_deg


def test_add_then_subtract_round_trip():
    a = Vector2D(1.5, -2.0)
    b = Vector2D(0.25, 4.0)
    assert (a + b) - b == a


def test_multiply_then_divide_round_trip():
    a = Vector2D(3.0, -6.0)
    assert (a * 4.0) / 4.0 == a
    assert 2.0 * a == a * 2.0


def test_negation():
    assert -Vector2D(2.0, -3.0) == Vector2D(-2.0, 3.0)


def test_length_of_three_four():
    assert Vector2D(3.0, 4.0).length() == pytest.approx(5.0)


def test_dot_of_perpendicular_is_zero():
    assert Vector2D(2.0, 0.0).dot(Vector2D(0.0, 7.0)) == 0.0


def test_dot_with_self_is_length_squared():
    v = Vector2D(1.2, -3.4)
    assert v.dot(v) == pytest.approx(v.length() ** 2)


def test_normalized_has_unit_length():
    v = Vector2D(-7.0, 2.5).normalized()
    assert v.length() == pytest.approx(1.0)


def test_normalized_zero_stays_zero():
    assert Vector2D(0.0, 0.0).normalized() == Vector2D(0.0, 0.0)


def test_angle_between_perpendicular_vectors():
    angle = Vector2D(1.0, 0.0).angle_to(Vector2D(0.0, 1.0))
    assert angle == pytest.approx(math.pi / 2)


def test_angle_to_same_direction_is_zero():
    assert Vector2D(2.0, 2.0).angle_to(Vector2D(5.0, 5.0)) == pytest.approx(0.0)


def test_angle_to_zero_vector_raises():
    with pytest.raises(ValueError):
        Vector2D(1.0, 0.0).angle_to(Vector2D(0.0, 0.0))


def test_rotate_quarter_turn():
    r = Vector2D(1.0, 0.0).rotated(math.pi / 2)
    assert r.x == pytest.approx(0.0, abs=1e-12)
    assert r.y == pytest.approx(1.0)


def test_rotation_preserves_length_and_inverts():
    v = Vector2D(3.0, -1.0)
    r = v.rotated(0.7)
    assert r.length() == pytest.approx(v.length())
    back = r.rotated(-0.7)
    assert back.x == pytest.approx(v.x)
    assert back.y == pytest.approx(v.y)


def test_degree_radian_conversions():
    assert deg_to_rad(180.0) == pytest.approx(math.pi)
    assert rad_to_deg(math.pi) == pytest.approx(180.0)
    assert rad_to_deg(deg_to_rad(37.0)) == pytest.approx(37.0)


def test_vector_is_immutable():
    v = Vector2D(1.0, 2.0)
    with pytest.raises(AttributeError):
        v.x = 5.0
    assert v.x == 1.0
    assert v == Vector2D(1.0, 2.0)