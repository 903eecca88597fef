"""The player's camera and how it turns and walks through the map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from raycub.colour import normalize_angle
from raycub.dda import cast_ray
from raycub.vector import Vec2

DEFAULT_SPEED = 5
DEFAULT_FOV = 70
TURN_STEP = 3.0

_MIN_CLEARANCE = 0.1
_STEP_SCALE = 0.01


@dataclass
class Camera:
    """Position in map units, heading in degrees and field of view."""

    position: Vec2
    degree: float = 0.0
    vector: Vec2 = Vec2(1.0, 0.0)
    speed: int = DEFAULT_SPEED
    fov: int = DEFAULT_FOV

    def turn(self, delta: float) -> None:
        """Change the heading by ``delta`` degrees, kept within [0, 360)."""
        self.degree = normalize_angle(self.degree + delta)

    def move(self, angle: float, grid: Sequence[str]) -> bool:
        """Take one step at ``angle`` degrees relative to the heading.

        The step is refused when the nearest wall in that direction is no
        further than a tenth of a cell. Returns whether the camera moved.
        """
        heading = self.degree + angle
        step = self.vector.rotate(heading)
        hit = cast_ray(self.position, step, heading, grid)
        if hit.distance <= _MIN_CLEARANCE:
            return False
        self.position = self.position + step * (_STEP_SCALE * self.speed)
        return True