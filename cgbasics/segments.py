"""Random line segments and brute-force detection of crossing pairs."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable

from cgbasics.point import Point, segments_intersect


@dataclass
class Segment:
    """A 2D line segment from (x1, y1) to (x2, y2)."""

    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0

    @classmethod
    def random(
        cls,
        limit: int,
        max_length: float,
        rng: random.Random | None = None,
    ) -> Segment:
        """Build a segment starting at a random integer point below ``limit``.

        Each coordinate of the end point differs from the start by at most
        ``max_length``, in a randomly chosen direction.
        """
        if limit <= 0:
            raise ValueError("limit must be positive")
        rng = rng if rng is not None else random.Random()
        x1 = float(rng.randrange(limit))
        y1 = float(rng.randrange(limit))
        delta_x = rng.randrange(limit) / limit
        delta_y = rng.randrange(limit) / limit
        x2 = x1 + delta_x * max_length if rng.randrange(2) else x1 - delta_x * max_length
        y2 = y1 + delta_y * max_length if rng.randrange(2) else y1 - delta_y * max_length
        return cls(x1, y1, x2, y2)

    def start(self) -> Point:
        """The first end point."""
        return Point(self.x1, self.y1)

    def end(self) -> Point:
        """The second end point."""
        return Point(self.x2, self.y2)


def random_segments(
    count: int,
    limit: int,
    max_length: float,
    rng: random.Random | None = None,
) -> list[Segment]:
    """Generate ``count`` random segments."""
    rng = rng if rng is not None else random.Random()
    return [Segment.random(limit, max_length, rng) for _ in range(count)]


def intersecting_pairs(segments: Iterable[Segment]) -> list[tuple[int, int]]:
    """Test every ordered pair of segments and return the indices that cross.

    Each pair is tested in both orders, so a crossing appears twice.
    """
    items = list(segments)
    return [
        (i, j)
        for i, a in enumerate(items)
        for j, b in enumerate(items)
        if segments_intersect(a.start(), a.end(), b.start(), b.end())
    ]