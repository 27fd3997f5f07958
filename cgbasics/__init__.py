"""Computer graphics building blocks: points, colours, segments, polygons,
Bezier curves, instances, raster images and image filters."""

__version__ = "0.1.0"