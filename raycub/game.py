"""Game state: scene loading, wall textures, key handling and frame drawing."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union

from PIL import Image as PILImage

from raycub.camera import TURN_STEP, Camera
from raycub.colour import make_colour
from raycub.dda import Side
from raycub.image import Image
from raycub.mapcheck import ParseError
from raycub.mapfile import SceneConfig
from raycub.minimap import MINIMAP_SIZE, draw_camera, draw_fov, draw_map, minimap_block_size
from raycub.projection import render_view
from raycub.vector import Vec2

WIDTH = 1100
HEIGHT = 600

_TRANSPARENT = 0xFF000000


class Key(IntEnum):
    """Key codes the game reacts to, as X11 keysyms."""

    ESCAPE = 65307
    LEFT = 65361
    RIGHT = 65363
    A = 97
    D = 100
    S = 115
    W = 119


_MOVES = {Key.W: 0.0, Key.D: 270.0, Key.A: 90.0, Key.S: 180.0}


def load_texture(path: Union[str, os.PathLike]) -> Image:
    """Load an image file as a texture of packed ``0xAARRGGBB`` pixels.

    Opaque pixels carry a zero alpha byte; fully transparent pixels are
    stored as ``0xFF000000``.
    """
    try:
        with PILImage.open(os.fspath(path)) as source:
            rgba = source.convert("RGBA")
    except (OSError, ValueError, SyntaxError) as exc:
        raise ParseError("Texture could not be loaded.") from exc
    texture = Image(rgba.width, rgba.height)
    data = rgba.tobytes()
    texture.pixels = [
        _TRANSPARENT if alpha == 0 else (red << 16) | (green << 8) | blue
        for red, green, blue, alpha in zip(data[0::4], data[1::4], data[2::4], data[3::4])
    ]
    return texture


@dataclass
class Game:
    """Everything needed to draw frames and react to the player's keys.

    ``textures`` is indexed by :class:`Side`: east, south, west, north.
    """

    camera: Camera
    grid: tuple[str, ...]
    textures: tuple[Image, ...]
    floor: int
    ceiling: int
    block_size: int = field(init=False)
    view: Image = field(init=False)
    minimap: Image = field(init=False)
    running: bool = True

    def __post_init__(self) -> None:
        self.grid = tuple(self.grid)
        self.textures = tuple(self.textures)
        if len(self.textures) != len(Side):
            raise ValueError("four wall textures are required")
        rows = len(self.grid)
        cols = max((len(row) for row in self.grid), default=0)
        self.block_size = minimap_block_size(cols, rows, MINIMAP_SIZE)
        if self.block_size == 0:
            raise ValueError("Failed to init minimap")
        self.view = Image(WIDTH, HEIGHT)
        self.minimap = Image(self.block_size * cols, self.block_size * rows)

    @classmethod
    def from_scene(cls, scene: SceneConfig) -> Game:
        """Build a game from a validated scene, loading its four textures."""
        textures = tuple(
            load_texture(path) for path in (scene.east, scene.south, scene.west, scene.north)
        )
        start = scene.camera
        camera = Camera(position=Vec2(start.x, start.y), degree=float(start.direction))
        return cls(
            camera=camera,
            grid=scene.grid,
            textures=textures,
            floor=make_colour(*scene.floor, 255),
            ceiling=make_colour(*scene.ceiling, 255),
        )

    @property
    def minimap_origin(self) -> tuple[int, int]:
        """Window position of the minimap's top-left corner."""
        return (WIDTH - self.minimap.width, HEIGHT - self.minimap.height)

    def handle_key(self, key: int) -> None:
        """Turn, walk or quit in response to a key; other keys are ignored."""
        try:
            key = Key(key)
        except ValueError:
            return
        if key is Key.ESCAPE:
            self.running = False
        elif key is Key.RIGHT:
            self.camera.turn(-TURN_STEP)
        elif key is Key.LEFT:
            self.camera.turn(TURN_STEP)
        else:
            self.camera.move(_MOVES[key], self.grid)

    def draw(self) -> None:
        """Redraw the first-person view and the minimap."""
        self.view.clear()
        render_view(self.view, self.camera, self.grid, self.textures, self.floor, self.ceiling)
        self.minimap.clear()
        draw_map(self.minimap, self.grid, self.block_size)
        draw_fov(self.minimap, self.camera, self.grid, self.block_size)
        draw_camera(self.minimap, self.camera, self.block_size)