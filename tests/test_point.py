import math

import pytest

from cgbasics.point import (
    Point,
    Side,
    component_max,
    component_min,
    cross,
    distance,
    dot,
    intersect_2d,
    intersection_test_count,
    reset_intersection_test_count,
    segments_intersect,
    side,
)


def coords(p):
    return (p.x, p.y, p.z)


def test_default_point_is_origin():
    assert Point() == Point(0, 0, 0)


def test_set_replaces_coordinates_with_default_z():
    p = Point(5, 6, 7)
    p.set(1, 2)
    assert p == Point(1, 2, 0)


def test_multiply_and_translate():
    p = Point(1, 2, 3)
    p.multiply(2, 3, 4)
    assert p == Point(2, 6, 12)
    p.translate(-2, -6, -12)
    assert p == Point(0, 0, 0)


def test_arithmetic_operators():
    a = Point(1, 2, 3)
    b = Point(4, 5, 6)
    assert (a + b) - b == a
    assert a * 2 == a + a
    assert -a + a == Point(0, 0, 0)
    assert 3 * a == a * 3


def test_length_matches_dot_product():
    v = Point(2, 3, 6)
    assert math.isclose(v.length() ** 2, dot(v, v))


def test_normalize_gives_unit_length_same_direction():
    v = Point(3, 4, 12)
    original = Point(v.x, v.y, v.z)
    v.normalize()
    assert math.isclose(v.length(), 1.0)
    assert coords(cross(v, original)) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        Point().normalize()


@pytest.mark.parametrize("method", ["rotate_x", "rotate_y", "rotate_z"])
def test_rotation_round_trip_and_length(method):
    p = Point(1.5, -2.0, 0.75)
    original = Point(p.x, p.y, p.z)
    getattr(p, method)(37)
    assert math.isclose(p.length(), original.length())
    getattr(p, method)(-37)
    assert coords(p) == pytest.approx(coords(original), abs=1e-9)


def test_rotate_z_keeps_z():
    p = Point(1, 2, 9)
    p.rotate_z(123)
    assert p.z == 9


def test_rotate_z_quarter_turn_maps_x_to_y():
    p = Point(1, 0, 0)
    p.rotate_z(90)
    assert p.x == pytest.approx(0.0, abs=1e-9)
    assert p.y == pytest.approx(1.0, abs=1e-9)
    assert p.z == pytest.approx(0.0, abs=1e-9)


def test_str_format():
    assert str(Point(1, 2, 3)) == "(1, 2, 3)"


def test_component_min_max_xy():
    a = Point(0, 5, 1)
    b = Point(3, 2, 4)
    assert (component_min(a, b).x, component_min(a, b).y) == (0, 2)
    assert (component_max(a, b).x, component_max(a, b).y) == (3, 5)


def test_component_max_z_compares_with_first_x():
    a = Point(10, 0, 1)
    b = Point(0, 0, 4)
    # b.z (4) is not greater than a.x (10), so a.z is kept
    assert component_max(a, b).z == 1


def test_cross_is_perpendicular():
    a = Point(1, 2, 3)
    b = Point(-2, 0.5, 4)
    c = cross(a, b)
    assert math.isclose(dot(a, c), 0.0, abs_tol=1e-9)
    assert math.isclose(dot(b, c), 0.0, abs_tol=1e-9)
    assert coords(cross(b, a)) == pytest.approx(coords(-c), abs=1e-9)


def test_intersect_2d_parallel_returns_none():
    assert intersect_2d(Point(0, 0), Point(1, 1), Point(0, 1), Point(1, 2)) is None


def test_intersect_2d_parameters_locate_same_point():
    k, l, m, n = Point(0, 0), Point(4, 2), Point(1, 3), Point(3, -1)
    s, t = intersect_2d(k, l, m, n)
    assert s == pytest.approx(0.5)
    assert t == pytest.approx(0.5)
    on_first = k + (l - k) * s
    on_second = m + (n - m) * t
    assert coords(on_first) == pytest.approx((2.0, 1.0, 0.0), abs=1e-9)
    assert coords(on_second) == pytest.approx((2.0, 1.0, 0.0), abs=1e-9)


def test_segments_intersect_cases():
    assert segments_intersect(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
    assert not segments_intersect(Point(0, 0), Point(1, 1), Point(3, 0), Point(4, -5))
    assert not segments_intersect(Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1))


def test_intersection_counter():
    reset_intersection_test_count()
    assert intersection_test_count() == 0
    for _ in range(3):
        segments_intersect(Point(0, 0), Point(1, 1), Point(0, 1), Point(1, 0))
    assert intersection_test_count() == 3
    reset_intersection_test_count()
    assert intersection_test_count() == 0


def test_distance_properties():
    p = Point(1, 2, 3)
    q = Point(-4, 0, 7)
    assert distance(p, p) == 0
    assert math.isclose(distance(p, q), distance(q, p))
    assert math.isclose(distance(p, q), (p - q).length())


def test_side():
    p1, p2 = Point(0, 0), Point(1, 0)
    assert side(p1, p2, Point(0.5, 1)) is Side.LEFT
    assert side(p1, p2, Point(0.5, -1)) is Side.RIGHT
    assert side(p1, p2, Point(2, 0)) is Side.ON
    assert int(Side.LEFT) == 0 and int(Side.ON) == 2