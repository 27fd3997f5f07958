import math

import pytest

from cgbasics.bezier import QuadraticBezier
from cgbasics.point import Point, distance


def curve():
    return QuadraticBezier(Point(0, 0), Point(5, 10), Point(10, 0))


def test_end_points():
    c = curve()
    assert c.point_at(0.0) == Point(0, 0)
    assert c.point_at(1.0) == Point(10, 0)


def test_control_points():
    c = curve()
    assert c.control_point(1) == Point(5, 10)
    with pytest.raises(IndexError):
        c.control_point(3)


def test_straight_line_length_matches_distance():
    c = QuadraticBezier(Point(0, 0), Point(3, 4), Point(6, 8))
    assert math.isclose(c.length, distance(Point(0, 0), Point(6, 8)), rel_tol=1e-9)


def test_length_exceeds_chord_for_curved_path():
    c = curve()
    assert c.length > distance(Point(0, 0), Point(10, 0))
    assert c.length < distance(Point(0, 0), Point(5, 10)) + distance(Point(5, 10), Point(10, 0))


def test_t_for_distance():
    c = curve()
    assert math.isclose(c.t_for_distance(c.length), 1.0)
    assert math.isclose(c.t_for_distance(c.length / 2), 0.5)


def test_default_curve_has_zero_length():
    c = QuadraticBezier()
    assert c.length == 0
    with pytest.raises(ZeroDivisionError):
        c.t_for_distance(1.0)


def test_sample_runs_from_start_to_end():
    c = curve()
    pts = c.sample()
    assert pts[0] == c.point_at(0.0)
    assert pts[-1] == c.point_at(1.0)
    assert len(pts) >= 51


def test_symmetric_curve_midpoint_on_axis():
    c = curve()
    mid = c.point_at(0.5)
    assert math.isclose(mid.x, 5.0)


def test_color_in_range():
    assert all(0 <= QuadraticBezier().color < 100 for _ in range(50))
    assert QuadraticBezier(color=7).color == 7