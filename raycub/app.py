"""Command-line entry point: load a scene and open the game window."""

from __future__ import annotations

import os
import sys
from array import array
from typing import Optional, Sequence

from raycub.game import HEIGHT, WIDTH, Game, Key
from raycub.image import Image
from raycub.mapfile import match_extension, read_scene

_FPS = 60
_TYPECODE = "I" if array("I").itemsize == 4 else "L"


def _report(message: str) -> None:
    print("Error")
    print(message)


def _rgb_bytes(image: Image) -> bytes:
    packed = array(_TYPECODE, image.pixels)
    if sys.byteorder == "big":
        packed.byteswap()
    raw = packed.tobytes()
    rgb = bytearray(len(image.pixels) * 3)
    rgb[0::3] = raw[2::4]
    rgb[1::3] = raw[1::4]
    rgb[2::3] = raw[0::4]
    return bytes(rgb)


def _run(game: Game) -> None:
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    keymap = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
    }

    def surface(image: Image):
        return pygame.image.frombuffer(_rgb_bytes(image), (image.width, image.height), "RGB")

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("raycub")
        pygame.key.set_repeat(200, 16)
        clock = pygame.time.Clock()
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN and event.key in keymap:
                    game.handle_key(keymap[event.key])
            if not game.running:
                break
            game.draw()
            screen.blit(surface(game.view), (0, 0))
            screen.blit(surface(game.minimap), game.minimap_origin)
            pygame.display.flip()
            clock.tick(_FPS)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the scene named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Wrong number of arguments")
        return 1
    path = args[0]
    if not path:
        print("No map to read")
        return 1
    try:
        match_extension(path, ".cub")
        scene = read_scene(path)
        game = Game.from_scene(scene)
    except ValueError as exc:
        _report(str(exc))
        return 1
    try:
        _run(game)
    except RuntimeError:
        _report("Could not create window")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())