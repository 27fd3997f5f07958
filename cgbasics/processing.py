"""Whole-image filters and a command that applies them to an image file."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, Sequence

from cgbasics.image import Image, ImageLoadError

THRESHOLD = 100
SENSITIVITY = 10
DEFAULT_INPUT = "Imagens/Falcao.jpg"
DEFAULT_OUTPUT = "output.bmp"

_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)


def _check_sizes(src: Image, dst: Image) -> None:
    if dst.width < src.width or dst.height < src.height:
        raise ValueError("destination image is smaller than the source")


def _pixels(image: Image) -> Iterable[tuple[int, int]]:
    return ((x, y) for x in range(image.width) for y in range(image.height))


def black_and_white(src: Image, dst: Image, threshold: float = THRESHOLD) -> None:
    """Paint dst black where src is darker than ``threshold``, white elsewhere."""
    _check_sizes(src, dst)
    for x, y in _pixels(src):
        colour = _BLACK if src.intensity(x, y) < threshold else _WHITE
        dst.draw_pixel(x, y, *colour)


def black_and_white_range(src: Image, dst: Image, imin: float, imax: float) -> None:
    """Paint dst black where src intensity lies in imin..imax, white elsewhere."""
    _check_sizes(src, dst)
    for x, y in _pixels(src):
        colour = _BLACK if imin <= src.intensity(x, y) <= imax else _WHITE
        dst.draw_pixel(x, y, *colour)


def detect_borders(src: Image, dst: Image, sensitivity: float = SENSITIVITY) -> None:
    """Mark in white every pixel whose right neighbour differs by more than
    ``sensitivity`` in intensity; others become black.

    The last column of dst is left untouched.
    """
    _check_sizes(src, dst)
    for y in range(src.height):
        for x in range(src.width - 1):
            diff = abs(src.intensity(x, y) - src.intensity(x + 1, y))
            dst.draw_pixel(x, y, *(_WHITE if diff > sensitivity else _BLACK))


def grayscale(src: Image, dst: Image) -> None:
    """Write into dst the grey level of every src pixel."""
    _check_sizes(src, dst)
    for x, y in _pixels(src):
        dst.draw_gray(x, y, int(src.intensity(x, y)))


def flip_vertical(src: Image, dst: Image) -> None:
    """Write src into dst upside down."""
    _check_sizes(src, dst)
    last = src.height - 1
    for x, y in _pixels(src):
        dst.draw_pixel(x, y, *src.read_pixel(x, last - y))


def sort_window(window: Iterable[int]) -> list[int]:
    """Return the values of a filter window in ascending order."""
    return sorted(window)


_OPERATIONS: dict[str, Callable[[Image, Image], None]] = {
    "bw": black_and_white,
    "gray": grayscale,
    "borders": detect_borders,
    "invert": flip_vertical,
}


def _as_rgb(image: Image) -> Image:
    if image.channels >= 3:
        return image
    rgb = Image(image.width, image.height, 3)
    grey = image.data[:: image.channels]
    rgb.data = bytearray(v for value in grey for v in (value, value, value))
    return rgb


def main(argv: Sequence[str] | None = None) -> int:
    """Load an image, apply the chosen filters in order and save the result."""
    parser = argparse.ArgumentParser(description="Apply simple filters to an image.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    parser.add_argument(
        "-o",
        "--operation",
        action="append",
        choices=sorted(_OPERATIONS),
        default=[],
        help="filter to apply; may be given several times",
    )
    args = parser.parse_args(argv)

    try:
        image = _as_rgb(Image.load(args.input))
    except (ImageLoadError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1

    for name in args.operation:
        result = Image(image.width, image.height, image.channels)
        _OPERATIONS[name](image, result)
        image = result

    image.save(args.output)
    return 0