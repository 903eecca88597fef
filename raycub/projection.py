"""First-person projection of the map into textured wall columns."""

from __future__ import annotations

import math
from typing import Sequence

from raycub.camera import Camera
from raycub.colour import adjust_brightness
from raycub.dda import RayHit, Side, cast_ray
from raycub.image import Image
from raycub.lines import plot_line

_MAX_COLUMN = 0xFFFFFFFF


def _column_height(height: int, view_dist: float) -> int:
    if view_dist <= 0:
        return _MAX_COLUMN
    ratio = height / view_dist
    if not math.isfinite(ratio) or ratio >= _MAX_COLUMN:
        return _MAX_COLUMN
    return int(ratio)


def _draw_column(
    image: Image,
    x: int,
    wall_height: int,
    hit: RayHit,
    textures: Sequence[Image],
    floor: int,
    ceiling: int,
) -> None:
    height = image.height
    texture = textures[hit.side]
    step = texture.height / wall_height if wall_height else 0.0
    if wall_height > height:
        top, bottom = 0, height - 1
        begin = ((1 - height / wall_height) / 2.0) * texture.height
    else:
        top = (height - wall_height) // 2
        bottom = (height + wall_height) // 2
        begin = 0.0
    shade = wall_height / height

    if hit.side in (Side.EAST, Side.NORTH):
        tex_x = int((1.0 - hit.position) * texture.width)
    else:
        tex_x = int(hit.position * texture.width)

    for y in range(bottom - top + 1):
        colour = texture.get_pixel(tex_x, int(begin + y * step))
        image.put_pixel(x, top + y, adjust_brightness(colour, shade))

    plot_line(image, (x, 0), (x, top - 1), ceiling)
    plot_line(image, (x, bottom + 1), (x, height - 1), floor)


def render_view(
    image: Image,
    camera: Camera,
    grid: Sequence[str],
    textures: Sequence[Image],
    floor: int,
    ceiling: int,
) -> None:
    """Render the camera's view into ``image``, one column per ray.

    ``textures`` is indexed by :class:`Side`; walls are darkened as they
    recede and the space above and below them is filled with the ceiling
    and floor colours.
    """
    width, height = image.width, image.height
    if width == 0 or height == 0:
        return
    spread = math.tan(((camera.fov / 2.0) / 180) * math.pi)
    for x in range(width):
        deg = (math.atan(-spread + (2.0 * spread * x) / width) * 180) / math.pi
        hit = cast_ray(camera.position, camera.vector.rotate(camera.degree - deg), deg, grid)
        wall_height = _column_height(height, hit.view_dist)
        _draw_column(image, x, wall_height, hit, textures, floor, ceiling)