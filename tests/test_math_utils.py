"""Tests for vector and angle helpers."""

import math

import pytest

from aquarium.math_utils import (
    Vector2,
    ellipse_points,
    normalize_angle,
    quadratic_bezier,
    rotate_point,
)


class TestNormalizeAngle:
    @pytest.mark.parametrize(
        "angle, expected",
        [
            (0.0, 0.0),
            (math.pi, math.pi),
            (-math.pi, math.pi),
            (3 * math.pi / 2, -math.pi / 2),
            (-3 * math.pi / 2, math.pi / 2),
            (7.0, 7.0 - 2 * math.pi),
            (-20.0, -20.0 + 6 * math.pi),
        ],
    )
    def test_wraps_into_half_open_interval(self, angle, expected):
        assert normalize_angle(angle) == pytest.approx(expected)

    def test_shortest_signed_difference(self):
        assert normalize_angle(-3.0 - 3.0) == pytest.approx(2 * math.pi - 6.0)


class TestVector2:
    def test_distance_and_bearing(self):
        a = Vector2(0, 0)
        b = Vector2(3, 4)
        assert a.distance_to(b) == 5
        assert a.angle_to(Vector2(0, 10)) == pytest.approx(math.pi / 2)

    def test_equality_tolerates_float_noise(self):
        assert Vector2(0.1 + 0.2, 1) == Vector2(0.3, 1)
        assert Vector2(0, 0) != Vector2(0, 1e-6)
        assert Vector2(1, 2) != (1, 2)

    def test_update_and_copy_are_independent(self):
        v = Vector2(1, 2)
        c = v.copy()
        v.update(5, 6)
        assert c.as_tuple() == (1, 2)
        assert tuple(v) == (5, 6)


def test_rotate_point_quarter_turn():
    x, y = rotate_point((1.0, 0.0), math.pi / 2)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(1.0)


def test_quadratic_bezier_endpoints_and_midpoint():
    points = quadratic_bezier((0, 0), (5, 10), (10, 0), segments=4)
    assert len(points) == 5
    assert points[0] == (0, 0)
    assert points[-1] == (10, 0)
    assert points[2] == pytest.approx((5, 5))


def test_ellipse_points_bounds():
    points = ellipse_points(10, 4, segments=8)
    assert len(points) == 8
    assert points[0] == pytest.approx((10, 0))
    assert max(abs(y) for _, y in points) == pytest.approx(4)
