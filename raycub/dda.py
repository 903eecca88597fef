"""Grid ray casting with the digital differential analyser."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

from raycub.vector import Vec2


class Side(IntEnum):
    """The wall face a ray hit, which selects the wall texture."""

    EAST = 0
    SOUTH = 1
    WEST = 2
    NORTH = 3


@dataclass(frozen=True)
class RayHit:
    """Result of casting one ray into the map."""

    side: Side
    position: float
    view_dist: float
    distance: float


def _inverse(component: float) -> float:
    return math.inf if component == 0 else abs(1 / component)


def _cell(grid: Sequence[str], x: int, y: int) -> str:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    raise ValueError("ray left the map")


def cast_ray(position: Vec2, ray: Vec2, angle: float, grid: Sequence[str]) -> RayHit:
    """Step ``ray`` from ``position`` through ``grid`` until it meets a wall.

    ``distance`` is measured in multiples of ``ray``; ``view_dist`` is that
    distance scaled by the cosine of ``angle`` (degrees) to undo fish-eye.
    ``position`` in the result is where along the wall face the ray landed,
    in [0, 1). A ray that leaves the grid raises ``ValueError``.
    """
    map_x = int(position.x)
    map_y = int(position.y)
    inc_x = _inverse(ray.x)
    inc_y = _inverse(ray.y)

    if ray.y < 0:
        step_y = -1
        len_y = (position.y - map_y) * inc_y
    else:
        step_y = 1
        len_y = (map_y + 1.0 - position.y) * inc_y
    if ray.x < 0:
        step_x = -1
        len_x = (position.x - map_x) * inc_x
    else:
        step_x = 1
        len_x = (map_x + 1.0 - position.x) * inc_x

    while True:
        if len_x < len_y:
            len_x += inc_x
            map_x += step_x
            side = Side(step_x + 1)
        else:
            len_y += inc_y
            map_y += step_y
            side = Side(step_y + 2)
        if _cell(grid, map_x, map_y) == "1":
            break

    if side in (Side.EAST, Side.WEST):
        distance = len_x - inc_x
        offset = position.y + distance * ray.y
    else:
        distance = len_y - inc_y
        offset = position.x + distance * ray.x
    view_dist = math.cos((angle / 180) * math.pi) * distance
    return RayHit(side, offset - math.floor(offset), view_dist, distance)