"""Placed copies of a model: position, rotation about Z and scale."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Optional

from cgbasics.point import Point

Matrix = tuple[tuple[float, float, float, float], ...]


@dataclass
class Instance:
    """A model drawn at a position, rotated about Z and scaled.

    The transform is translation (in XY only), then rotation by
    ``rotation`` degrees about Z, then scale, applied to model coordinates.
    """

    model: Optional[Callable[[], None]] = None
    position: Point = field(default_factory=Point)
    scale: Point = field(default_factory=lambda: Point(1, 1, 1))
    rotation: float = 0.0
    velocity: Point = field(default_factory=Point)
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def matrix(self) -> Matrix:
        """The 4x4 model-to-world matrix, row-major."""
        rad = math.radians(self.rotation)
        c, s = math.cos(rad), math.sin(rad)
        sx, sy, sz = self.scale.x, self.scale.y, self.scale.z
        return (
            (c * sx, -s * sy, 0.0, self.position.x),
            (s * sx, c * sy, 0.0, self.position.y),
            (0.0, 0.0, sz, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )

    def transform_point(self, point: Point) -> Point:
        """Map a point from model coordinates to world coordinates."""
        rows = self.matrix()
        x, y, z = (
            row[0] * point.x + row[1] * point.y + row[2] * point.z + row[3]
            for row in rows[:3]
        )
        return Point(x, y, z)

    def world_position(self) -> Point:
        """Where the model's origin lies in world coordinates."""
        return self.transform_point(Point(0, 0, 0))

    def update(self, elapsed: float) -> None:
        """Advance the position by the velocity over ``elapsed`` seconds."""
        self.position = self.position + self.velocity * elapsed

    def draw(self) -> None:
        """Run the model's drawing routine, if any."""
        if self.model is not None:
            self.model()