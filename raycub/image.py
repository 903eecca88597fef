"""In-memory 32-bit pixel buffers."""

from __future__ import annotations

_MASK = 0xFFFFFFFF


class Image:
    """A width by height grid of packed ``0xAARRGGBB`` pixels, row-major."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, colour: int) -> None:
        """Set one pixel; coordinates outside the image are ignored."""
        if self._inside(x, y):
            self.pixels[y * self.width + x] = colour & _MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Read one pixel; coordinates outside the image read as 0."""
        if not self._inside(x, y):
            return 0
        return self.pixels[y * self.width + x]

    def clear(self) -> None:
        """Reset every pixel to 0."""
        self.pixels = [0] * (self.width * self.height)