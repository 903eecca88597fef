"""Top-down minimap: walls, floor, the camera and its field of view."""

from __future__ import annotations

from typing import Sequence

from raycub.camera import Camera
from raycub.dda import cast_ray
from raycub.image import Image
from raycub.lines import plot_line
from raycub.vector import Vec2, direction_vector

WHITE = 0xFFFFFF
GREY = 0x808080
OLIVE = 0x808000
MINIMAP_SIZE = 200

_FOV_STEP = 0.1
_HEADING_LENGTH = 10


def minimap_block_size(cols: int, rows: int, max_size: int) -> int:
    """Pixel size of one map cell so the whole map fits in ``max_size``."""
    longest = cols if cols > rows else rows
    if longest <= 0:
        raise ValueError("map must have at least one row and column")
    return max_size // longest


def _fill(image: Image, left: int, top: int, size: int, colour: int) -> None:
    for x in range(left, left + size):
        for y in range(top, top + size):
            image.put_pixel(x, y, colour)


def draw_map(image: Image, grid: Sequence[str], block_size: int) -> None:
    """Draw walls as white squares with a one-pixel gap and floor as grey."""
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            left, top = x * block_size, y * block_size
            if cell == "1":
                _fill(image, left, top, block_size - 1, WHITE)
            else:
                _fill(image, left, top, block_size, GREY)


def draw_ray(image: Image, origin: Vec2, ray: Vec2, block_size: int) -> None:
    """Draw ``ray`` (y pointing up) from ``origin`` in map units."""
    start_x = int(origin.x * block_size)
    start_y = int(origin.y * block_size)
    end = (start_x + int(ray.x * block_size), start_y - int(ray.y * block_size))
    plot_line(image, (start_x, start_y), end, OLIVE)


def draw_fov(image: Image, camera: Camera, grid: Sequence[str], block_size: int) -> None:
    """Fan out rays across the field of view, each ending at the wall it hits."""
    half = camera.fov / 2.0
    offset = -half
    while offset < half:
        orientation = camera.vector.rotate(camera.degree + offset)
        hit = cast_ray(camera.position, orientation, offset, grid)
        ray = direction_vector(camera.degree + offset, hit.distance)
        draw_ray(image, camera.position, ray, block_size)
        offset += _FOV_STEP


def draw_camera(image: Image, camera: Camera, block_size: int) -> None:
    """Mark the camera with a 3x3 square and a short heading line."""
    px = int(camera.position.x * block_size)
    py = int(camera.position.y * block_size)
    for dy in range(3):
        for dx in range(3):
            x, y = px - 1 + dx, py - 1 + dy
            if x >= 0 and y >= 0:
                image.put_pixel(x, y, WHITE)
    centre = Vec2(px, py)
    heading = camera.vector.rotate(camera.degree) * _HEADING_LENGTH
    plot_line(image, centre.to_pixel(), (centre + heading).to_pixel(), WHITE)