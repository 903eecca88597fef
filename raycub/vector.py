"""Two-dimensional vectors used for camera positions and ray directions."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An immutable 2-D vector in map units; y grows downwards."""

    x: float
    y: float

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def rotate(self, degrees: float) -> Vec2:
        """Rotate counter-clockwise on screen (y pointing down) by ``degrees``."""
        rad = (-degrees / 180.0) * math.pi
        cos, sin = math.cos(rad), math.sin(rad)
        return Vec2(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def to_pixel(self) -> tuple[int, int]:
        """Truncate both components towards zero to integer pixel coordinates."""
        return (int(self.x), int(self.y))


def direction_vector(degrees: float, distance: float) -> Vec2:
    """Vector of length ``distance`` pointing at ``degrees`` in y-up orientation."""
    rad = (degrees / 180.0) * math.pi
    return Vec2(math.cos(rad) * distance, math.sin(rad) * distance)