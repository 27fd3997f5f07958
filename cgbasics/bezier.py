"""Quadratic Bezier curves."""

from __future__ import annotations

import random

from cgbasics.point import Point, distance

_STEPS = 50


class QuadraticBezier:
    """A quadratic Bezier curve with three control points."""

    def __init__(
        self,
        p0: Point | None = None,
        p1: Point | None = None,
        p2: Point | None = None,
        color: int | None = None,
    ) -> None:
        self._controls = (
            p0 if p0 is not None else Point(),
            p1 if p1 is not None else Point(),
            p2 if p2 is not None else Point(),
        )
        self.length = 0.0
        self.color = color if color is not None else random.randrange(100)
        self.compute_length()

    def point_at(self, t: float) -> Point:
        """The point of the curve at parameter ``t``."""
        u = 1 - t
        c0, c1, c2 = self._controls
        return c0 * (u * u) + c1 * (2 * u * t) + c2 * (t * t)

    def t_for_distance(self, travelled: float) -> float:
        """The parameter reached after travelling ``travelled`` along the curve."""
        if self.length == 0:
            raise ZeroDivisionError("the curve has zero length")
        return travelled / self.length

    def control_point(self, i: int) -> Point:
        """Control point ``i`` (0, 1 or 2)."""
        if not 0 <= i < 3:
            raise IndexError(f"control point index {i} out of range")
        return self._controls[i]

    def compute_length(self) -> float:
        """Approximate the arc length by a polyline; stores and returns it."""
        points = self.sample()
        self.length = sum(distance(a, b) for a, b in zip(points, points[1:]))
        return self.length

    def sample(self) -> list[Point]:
        """Points along the curve, from t=0 to t=1, used to draw it."""
        step = 1.0 / _STEPS
        points = []
        t = 0.0
        while t < 1.0:
            points.append(self.point_at(t))
            t += step
        points.append(self.point_at(1.0))
        return points