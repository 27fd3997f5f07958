# cgbasics

Small building blocks for introductory computer graphics work: 3D points and
vector operations, line segments and intersection tests, polygons read from
text files, quadratic Bezier curves, transformed model instances, a named
colour table, and an in-memory raster image with simple drawing and
processing routines. Pillow is the only dependency, used for reading and
writing image files.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Points and vectors — `cgbasics.point`

```python
from cgbasics.point import Point, Side, distance, segments_intersect, side

a = Point(0, 0)
b = Point(2, 2)
print(distance(a, b))
print(segments_intersect(Point(0, 0), Point(1, 1), Point(0, 1), Point(1, 0)))  # True
print(side(a, b, Point(0, 1)) is Side.LEFT)                                     # True
```

`Point` is a mutable dataclass with `x`, `y`, `z`. It supports `+`, `-`,
multiplication by a scalar, unary `-`, and in-place `set`, `multiply`,
`translate`, `normalize` (raises `ValueError` on a zero vector) and
`rotate_x` / `rotate_y` / `rotate_z` (angles in degrees). `length()` gives
its Euclidean length.

Module functions:

- `dot(v1, v2)` and `cross(v1, v2)` — scalar and vector products.
- `distance(p, q)` — Euclidean distance.
- `component_min(p1, p2)` / `component_max(p1, p2)` — component-wise
  minimum and maximum; note that the z component is chosen by comparing
  `p2.z` with `p1.x`.
- `intersect_2d(k, l, m, n)` — parameters `(s, t)` where lines KL and MN
  cross in the XY plane, or `None` when they are parallel.
- `segments_intersect(k, l, m, n)` — whether segments KL and MN meet. Every
  call is counted; read the count with `intersection_test_count()` and reset
  it with `reset_intersection_test_count()`.
- `side(p1, p2, a)` — `Side.LEFT`, `Side.RIGHT` or `Side.ON` for point A
  relative to the directed line P1→P2.

## Colours — `cgbasics.colors`

`NamedColor` enumerates a fixed palette of 100 named colours (`RED`,
`GOLD`, `SKY_BLUE`, …). `rgb(color)` returns its `(r, g, b)` components in
the range 0–1 and raises `ValueError` for an index that names no colour.

## Segments — `cgbasics.segments`

`Segment` holds `x1, y1, x2, y2` and gives its end points with `start()` and
`end()`. `Segment.random(limit, max_length, rng=None)` starts a segment at a
random integer point below `limit` and moves each end coordinate by up to
`max_length` in a random direction; `random_segments(count, limit,
max_length, rng=None)` builds a list of them. Pass a `random.Random` for
repeatable results.

`intersecting_pairs(segments)` tests every ordered pair of segments and
returns the `(i, j)` index pairs that cross; each crossing appears in both
orders.

## Polygons — `cgbasics.polygon`

`Polygon` is an ordered, closed list of points with `insert_vertex(point,
pos=None)` (raises `IndexError` for a position outside `0..len`),
`vertex(i)`, `set_vertex(i, point)`, `edge(n)` (the last edge closes the
polygon), `bounds()` (the minimum and maximum corners; `ValueError` when
empty), `len()` and iteration. `str()` lists one vertex per line.

`Polygon.from_file(path)` reads a text file whose first value is the vertex
count, followed by `x y` pairs; `Polygon.from_file_3d(path)` reads `x y z`
triples. Reading stops early at the end of the file or at a value that is
not a number.

## Bezier curves — `cgbasics.bezier`

`QuadraticBezier(p0, p1, p2, color=None)` evaluates points with
`point_at(t)`, returns control points with `control_point(i)`, produces a
51-point polyline with `sample()`, approximates its arc length along that
polyline with `compute_length()` (also kept in `length`) and turns a
travelled distance into a parameter with `t_for_distance(d)`. When no colour
is given, a random index below 100 is picked.

## Instances — `cgbasics.instance`

`Instance` places a model at `position`, rotated by `rotation` degrees about
Z and scaled by `scale`. `matrix()` gives the row-major 4×4 model-to-world
matrix, `transform_point(point)` maps a model point into world space and
`world_position()` gives where the model's origin ends up. `update(elapsed)`
moves `position` by `velocity * elapsed`, and `draw()` calls the `model`
callable if one is set.

## Images — `cgbasics.image`

`Image(width, height, channels=3)` is a raster stored bottom-up (row 0 is
the lowest line), filled with white. It offers:

- `Image.load(path)` — read a file through Pillow; raises `ImageLoadError`
  if it cannot be read or has more than 5000 lines.
- `save(path)` — write a 24-bit BMP.
- `resize(width, height, channels=3)` and `clear()` — reset to white.
- `draw_pixel`, `draw_gray`, `set_intensity`, `read_pixel`, `read_r`,
  `read_g`, `read_b`, and `intensity(x, y)` (0.3 R + 0.59 G + 0.11 B).
  Coordinates outside the image raise `IndexError`.
- `draw_hline`, `draw_vline`, `draw_box`, `fill_box`, `draw_line`.
- `copy_to(other)` — copy the pixel bytes into another image at least as
  large.

## Filters — `cgbasics.processing`

Each filter reads `src` and writes into `dst`, which must be at least as
large:

- `black_and_white(src, dst, threshold=100)`
- `black_and_white_range(src, dst, imin, imax)`
- `detect_borders(src, dst, sensitivity=10)` — compares each pixel with its
  right neighbour; the last column of `dst` is left untouched.
- `grayscale(src, dst)`
- `flip_vertical(src, dst)`

`sort_window(values)` returns a filter window's values in ascending order.

## Command line

```
cgbasics-image [input] [output] [-o {borders,bw,gray,invert}] ...
```

loads `input` (default `Imagens/Falcao.jpg`), applies each `-o` filter in
the order given and writes `output` (default `output.bmp`) as a BMP file.
Images with fewer than three channels are turned into RGB first. It exits
with status 1 if the input cannot be loaded.

## What it does not do

There is no window or on-screen drawing: images, curves, polygons and
instances are computed in memory only, and the position and zoom fields of
`Image` are stored but not used for display. There is no interactive
viewer; image work goes through the functions above or the
`cgbasics-image` command.