"""Polygons stored as an ordered list of vertices."""

from __future__ import annotations

import os
from typing import Iterable, Iterator

from cgbasics.point import Point, component_max, component_min


class Polygon:
    """An ordered, closed sequence of vertices."""

    def __init__(self, vertices: Iterable[Point] | None = None) -> None:
        self._vertices: list[Point] = list(vertices) if vertices is not None else []

    def insert_vertex(self, point: Point, pos: int | None = None) -> None:
        """Append a vertex, or insert it before position ``pos``.

        Raises IndexError when ``pos`` is outside 0..len(self).
        """
        if pos is None:
            self._vertices.append(point)
            return
        if pos < 0 or pos > len(self._vertices):
            raise IndexError(f"invalid vertex position {pos}")
        self._vertices.insert(pos, point)

    def vertex(self, i: int) -> Point:
        """The vertex at index ``i``."""
        return self._vertices[i]

    def set_vertex(self, i: int, point: Point) -> None:
        """Replace the vertex at index ``i``."""
        self._vertices[i] = point

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._vertices)

    def bounds(self) -> tuple[Point, Point]:
        """The (minimum, maximum) corners of the bounding box."""
        if not self._vertices:
            raise ValueError("an empty polygon has no bounds")
        lo = hi = self._vertices[0]
        for v in self._vertices:
            lo = component_min(v, lo)
            hi = component_max(v, hi)
        return lo, hi

    def edge(self, n: int) -> tuple[Point, Point]:
        """The end points of edge ``n``; the last edge closes the polygon."""
        return self._vertices[n], self._vertices[(n + 1) % len(self._vertices)]

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Polygon:
        """Read a vertex count followed by that many ``x y`` pairs."""
        return cls._read(path, 2)

    @classmethod
    def from_file_3d(cls, path: str | os.PathLike[str]) -> Polygon:
        """Read a vertex count followed by that many ``x y z`` triples."""
        return cls._read(path, 3)

    @classmethod
    def _read(cls, path: str | os.PathLike[str], dims: int) -> Polygon:
        with open(path, encoding="utf-8") as handle:
            tokens = handle.read().split()
        if not tokens:
            raise ValueError(f"{path}: missing vertex count")
        try:
            count = int(tokens[0])
        except ValueError as exc:
            raise ValueError(f"{path}: invalid vertex count {tokens[0]!r}") from exc
        polygon = cls()
        values = iter(tokens[1:])
        for _ in range(count):
            coords = []
            for token in values:
                try:
                    coords.append(float(token))
                except ValueError:
                    break
                if len(coords) == dims:
                    break
            if len(coords) < dims:
                break
            polygon.insert_vertex(Point(*coords))
        return polygon

    def __str__(self) -> str:
        return "\n".join(str(v) for v in self._vertices)