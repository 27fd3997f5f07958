"""In-memory raster images with simple drawing primitives.

Rows are stored bottom-up: row 0 is the lowest line of the picture, which
is how the image is laid out when drawn with a lower-left origin.
"""

from __future__ import annotations

import os

from PIL import Image as _PILImage

MAX_LINES = 5000

_MODES = {1: "L", 2: "LA", 3: "RGB", 4: "RGBA"}


class ImageLoadError(Exception):
    """Raised when an image file cannot be read."""


def _byte(value: float) -> int:
    return int(value) & 0xFF


class Image:
    """A width x height grid of pixels with ``channels`` bytes per pixel."""

    def __init__(self, width: int = 0, height: int = 0, channels: int = 3) -> None:
        self.pos_x = 0
        self.pos_y = 0
        self.zoom_h = 1.0
        self.zoom_v = 1.0
        self._width = 0
        self._height = 0
        self._channels = channels
        self.data = bytearray()
        if width or height:
            self.resize(width, height, channels)

    @property
    def width(self) -> int:
        """Number of pixels per row."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def channels(self) -> int:
        """Bytes per pixel."""
        return self._channels

    def resize(self, width: int, height: int, channels: int = 3) -> None:
        """Replace the contents with a white image of the given size."""
        if width < 0 or height < 0:
            raise ValueError("image size must not be negative")
        if not 1 <= channels <= 4:
            raise ValueError(f"unsupported channel count {channels}")
        self._width = width
        self._height = height
        self._channels = channels
        self.data = bytearray(b"\xff" * (width * height * channels))
        self.pos_x = self.pos_y = 0
        self.zoom_h = self.zoom_v = 1.0

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> Image:
        """Read an image file; raises ImageLoadError on failure."""
        try:
            with _PILImage.open(path) as pic:
                pic.load()
                if pic.mode not in _MODES.values():
                    has_alpha = "A" in pic.getbands() or "transparency" in pic.info
                    pic = pic.convert("RGBA" if has_alpha else "RGB")
                flipped = pic.transpose(_PILImage.Transpose.FLIP_TOP_BOTTOM)
        except OSError as exc:
            raise ImageLoadError(f"error loading image {path}: {exc}") from exc
        width, height = flipped.size
        if height > MAX_LINES:
            raise ImageLoadError(f"image {path} has more than {MAX_LINES} lines")
        channels = len(flipped.getbands())
        image = cls()
        image._width = width
        image._height = height
        image._channels = channels
        image.data = bytearray(flipped.tobytes())
        return image

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the image as a 24-bit BMP file."""
        if self._width < 1 or self._height < 1:
            raise ValueError("cannot save an empty image")
        pic = _PILImage.frombytes(
            _MODES[self._channels], (self._width, self._height), bytes(self.data)
        )
        pic = pic.transpose(_PILImage.Transpose.FLIP_TOP_BOTTOM).convert("RGB")
        pic.save(path, format="BMP")

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) outside the image")
        return (y * self._width + x) * self._channels

    def _rgb_offset(self, x: int, y: int) -> int:
        if self._channels < 3:
            raise ValueError("colour access needs at least 3 channels")
        return self._offset(x, y)

    def draw_pixel(self, x: int, y: int, r: int, g: int, b: int) -> None:
        """Set the colour of one pixel."""
        addr = self._rgb_offset(x, y)
        self.data[addr : addr + 3] = bytes((_byte(r), _byte(g), _byte(b)))

    def draw_gray(self, x: int, y: int, c: int) -> None:
        """Set one pixel to the grey level ``c``."""
        self.draw_pixel(x, y, c, c, c)

    def read_pixel(self, x: int, y: int) -> tuple[int, int, int]:
        """The (r, g, b) colour of one pixel."""
        addr = self._rgb_offset(x, y)
        r, g, b = self.data[addr : addr + 3]
        return r, g, b

    def read_r(self, x: int, y: int) -> int:
        """The red component of one pixel."""
        return self.read_pixel(x, y)[0]

    def read_g(self, x: int, y: int) -> int:
        """The green component of one pixel."""
        return self.read_pixel(x, y)[1]

    def read_b(self, x: int, y: int) -> int:
        """The blue component of one pixel."""
        return self.read_pixel(x, y)[2]

    def set_intensity(self, x: int, y: int, i: int) -> None:
        """Set one pixel to the grey level ``i``."""
        self.draw_gray(x, y, i)

    def intensity(self, x: int, y: int) -> float:
        """The luminance of one pixel: 0.3 R + 0.59 G + 0.11 B."""
        r, g, b = self.read_pixel(x, y)
        return 0.3 * r + 0.59 * g + 0.11 * b

    def draw_hline(self, y: int, x1: int, x2: int, r: int, g: int, b: int) -> None:
        """Draw a horizontal run of pixels from x1 to x2 inclusive."""
        lo, hi = sorted((x1, x2))
        for x in range(lo, hi + 1):
            self.draw_pixel(x, y, r, g, b)

    def draw_vline(self, x: int, y1: int, y2: int, r: int, g: int, b: int) -> None:
        """Draw a vertical run of pixels from y1 to y2 inclusive."""
        lo, hi = sorted((y1, y2))
        for y in range(lo, hi + 1):
            self.draw_pixel(x, y, r, g, b)

    def draw_box(
        self, x1: int, y1: int, x2: int, y2: int, r: int, g: int, b: int
    ) -> None:
        """Draw the outline of a rectangle."""
        self.draw_hline(y1, x1, x2, r, g, b)
        self.draw_hline(y2, x1, x2, r, g, b)
        self.draw_vline(x1, y1, y2, r, g, b)
        self.draw_vline(x2, y1, y2, r, g, b)

    def fill_box(
        self, x1: int, y1: int, x2: int, y2: int, r: int, g: int, b: int
    ) -> None:
        """Fill the rows y1..y2 between x1 and x2; nothing when y1 > y2."""
        for y in range(y1, y2 + 1):
            self.draw_hline(y, x1, x2, r, g, b)

    def draw_line(
        self, x0: int, y0: int, x1: int, y1: int, r: int, g: int, b: int
    ) -> None:
        """Draw a straight line between two pixels, both ends included."""
        dx = x1 - x0
        dy = y1 - y0
        self.draw_pixel(x0, y0, r, g, b)
        if abs(dx) > abs(dy):
            m = dy / dx
            c = y0 - m * x0
            step = -1 if dx < 0 else 1
            x = x0
            while x != x1:
                x += step
                self.draw_pixel(x, int(m * x + c + 0.5), r, g, b)
        elif dy != 0:
            m = dx / dy
            c = x0 - m * y0
            step = -1 if dy < 0 else 1
            y = y0
            while y != y1:
                y += step
                self.draw_pixel(int(m * y + c + 0.5), y, r, g, b)

    def copy_to(self, other: Image) -> None:
        """Copy this image's pixel bytes into the start of ``other``."""
        if len(other.data) < len(self.data):
            raise ValueError("destination image is smaller than the source")
        other.data[: len(self.data)] = self.data

    def clear(self) -> None:
        """Paint every pixel white."""
        self.data[:] = b"\xff" * len(self.data)