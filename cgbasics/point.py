"""Points and vectors in 3D space, plus basic 2D geometry helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

_PI = 3.14159265359


class Side(IntEnum):
    """Where a point lies relative to a directed line."""

    LEFT = 0
    RIGHT = 1
    ON = 2


@dataclass
class Point:
    """A mutable point (or vector) with x, y and z coordinates."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def set(self, x: float, y: float, z: float = 0.0) -> None:
        """Replace all three coordinates."""
        self.x, self.y, self.z = x, y, z

    def multiply(self, x: float, y: float, z: float) -> None:
        """Scale each coordinate by its own factor, in place."""
        self.x *= x
        self.y *= y
        self.z *= z

    def translate(self, x: float, y: float, z: float) -> None:
        """Add an offset to each coordinate, in place."""
        self.x += x
        self.y += y
        self.z += z

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> None:
        """Scale the vector to unit length, in place."""
        m = self.length()
        if m == 0:
            raise ValueError("cannot normalize a zero-length vector")
        self.x /= m
        self.y /= m
        self.z /= m

    def rotate_x(self, angle: float) -> None:
        """Rotate about the X axis by ``angle`` degrees."""
        rad = angle * _PI / 180.0
        c, s = math.cos(rad), math.sin(rad)
        self.y, self.z = self.y * c - self.z * s, self.y * s + self.z * c

    def rotate_y(self, angle: float) -> None:
        """Rotate about the Y axis by ``angle`` degrees."""
        rad = angle * _PI / 180.0
        c, s = math.cos(rad), math.sin(rad)
        self.x, self.z = self.x * c + self.z * s, -self.x * s + self.z * c

    def rotate_z(self, angle: float) -> None:
        """Rotate about the Z axis by ``angle`` degrees."""
        rad = angle * _PI / 180.0
        c, s = math.cos(rad), math.sin(rad)
        self.x, self.y = self.x * c - self.y * s, self.x * s + self.y * c

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: float) -> Point:
        return Point(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __neg__(self) -> Point:
        return self * -1

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"


def component_min(p1: Point, p2: Point) -> Point:
    """Component-wise minimum of two points.

    The z component is chosen by comparing ``p2.z`` with ``p1.x``, as the
    original bounding-box code does.
    """
    return Point(
        p2.x if p2.x < p1.x else p1.x,
        p2.y if p2.y < p1.y else p1.y,
        p2.z if p2.z < p1.x else p1.z,
    )


def component_max(p1: Point, p2: Point) -> Point:
    """Component-wise maximum of two points.

    The z component is chosen by comparing ``p2.z`` with ``p1.x``, as the
    original bounding-box code does.
    """
    return Point(
        p2.x if p2.x > p1.x else p1.x,
        p2.y if p2.y > p1.y else p1.y,
        p2.z if p2.z > p1.x else p1.z,
    )


def dot(v1: Point, v2: Point) -> float:
    """Scalar product of two vectors."""
    return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z


def cross(v1: Point, v2: Point) -> Point:
    """Vector product of two vectors."""
    return Point(
        v1.y * v2.z - v1.z * v2.y,
        v1.z * v2.x - v1.x * v2.z,
        v1.x * v2.y - v1.y * v2.x,
    )


class _Counter:
    def __init__(self) -> None:
        self.value = 0


_tests = _Counter()


def intersect_2d(k: Point, l: Point, m: Point, n: Point) -> tuple[float, float] | None:
    """Intersect lines KL and MN in the XY plane.

    Returns the parameters ``(s, t)`` of the intersection along KL and MN,
    or ``None`` when the lines are parallel.
    """
    det = (n.x - m.x) * (l.y - k.y) - (n.y - m.y) * (l.x - k.x)
    if det == 0.0:
        return None
    s = ((n.x - m.x) * (m.y - k.y) - (n.y - m.y) * (m.x - k.x)) / det
    t = ((l.x - k.x) * (m.y - k.y) - (l.y - k.y) * (m.x - k.x)) / det
    return s, t


def segments_intersect(k: Point, l: Point, m: Point, n: Point) -> bool:
    """Whether segments KL and MN meet; each call is counted."""
    _tests.value += 1
    params = intersect_2d(k, l, m, n)
    if params is None:
        return False
    s, t = params
    return 0.0 <= s <= 1.0 and 0.0 <= t <= 1.0


def intersection_test_count() -> int:
    """Number of segment tests since the last reset."""
    return _tests.value


def reset_intersection_test_count() -> None:
    """Set the segment test counter back to zero."""
    _tests.value = 0


def distance(p: Point, q: Point) -> float:
    """Euclidean distance between two points."""
    return (p - q).length()


def side(p1: Point, p2: Point, a: Point) -> Side:
    """Which side of the directed line P1->P2 the point A lies on."""
    z = cross(p2 - p1, a - p1).z
    if z > 0:
        return Side.LEFT
    if z < 0:
        return Side.RIGHT
    return Side.ON