import math

import pytest
from pygame import Vector2

from asteroids.geometry import (
    circles_overlap,
    dist_between_points,
    point_in_circle,
    polygon_points,
    ship_points,
    wrap_position,
    wrap_with_margin,
)


class TestDistances:
    def test_dist_between_points(self):
        assert dist_between_points(0, 0, 3, 4) == 5.0
        assert dist_between_points(1, 1, 1, 1) == 0.0

    def test_point_in_circle_is_strict(self):
        assert point_in_circle(Vector2(0, 9.9), Vector2(0, 0), 10)
        assert not point_in_circle(Vector2(0, 10), Vector2(0, 0), 10)

    def test_circles_overlap(self):
        assert circles_overlap(Vector2(0, 0), 10, Vector2(19, 0), 10)
        assert not circles_overlap(Vector2(0, 0), 10, Vector2(20, 0), 10)


class TestPolygons:
    def test_polygon_points_follow_offsets(self):
        points = polygon_points(Vector2(100, 100), 10, 0.0, [1.0, 2.0, 1.0, 2.0])
        assert points[0] == pytest.approx((110, 100))
        assert points[1] == pytest.approx((100, 120))
        assert points[2] == pytest.approx((90, 100))
        assert points[3] == pytest.approx((100, 80))

    def test_ship_nose_points_along_heading(self):
        nose = ship_points(Vector2(0, 0), 15, math.pi / 2)[0]
        # Pointing up on screen means negative y
        assert nose == pytest.approx((0, -20))


class TestWraparound:
    @pytest.mark.parametrize(
        "value, expected",
        [(-11, 110), (-10, -10), (50, 50), (110, 110), (111, -10)],
    )
    def test_wrap_with_margin(self, value, expected):
        assert wrap_with_margin(value, 100, 10) == expected

    def test_wrap_position_without_margin(self):
        pos = Vector2(-0.5, 601)
        wrap_position(pos, 800, 600)
        assert pos == Vector2(800, 0)
