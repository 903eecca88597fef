"""Reading and validating .cub scene descriptions."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from raycub.mapcheck import CameraStart, ParseError, validate_map

MAP_CHARS = " WESN01"

_TEXTURE_KEYS = {"NO": "north", "SO": "south", "EA": "east", "WE": "west"}
_COLOUR_KEYS = {"F": "floor", "C": "ceiling"}
_ELEMENTS = ("north", "south", "east", "west", "floor", "ceiling")

Colour = tuple[int, int, int]


@dataclass(frozen=True)
class SceneConfig:
    """A fully validated scene: wall textures, colours, map and camera."""

    north: str
    south: str
    east: str
    west: str
    floor: Colour
    ceiling: Colour
    grid: tuple[str, ...]
    camera: CameraStart

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def match_extension(path: str, extension: str) -> None:
    """Raise unless the trailing characters of ``path`` agree with ``extension``.

    Only the overlapping tail is compared, so a path shorter than the
    extension passes when it matches the extension's end.
    """
    if not (path.endswith(extension) or extension.endswith(path)):
        raise ParseError("extension is not valid")


def is_map_row(row: str) -> bool:
    """True when ``row`` is non-empty and made only of map characters."""
    return bool(row) and all(char in MAP_CHARS for char in row)


def check_commas(line: str) -> None:
    """Reject colour lines with stray, leading or trailing commas."""
    body = line[1:]
    if body.count(",") > 2:
        raise ParseError("number of commas should be 2 only")
    for char in body:
        if _is_digit(char):
            break
        if char == ",":
            raise ParseError("number of commas should be 2 only")
    for index in range(len(line) - 1, -1, -1):
        char = line[index]
        if _is_digit(char):
            break
        if char == "," and (index == 0 or line[index - 1] != ","):
            raise ParseError("number of commas should be 2 only")


def _colour_component(text: str) -> int:
    trimmed = text.strip(" ")
    if not trimmed or not all(_is_digit(char) for char in trimmed):
        raise ParseError("invalid color input")
    value = int(trimmed)
    if value > 255:
        raise ParseError("invalid color")
    return value


def parse_color(line: str) -> Colour:
    """Parse an ``F r,g,b`` or ``C r,g,b`` line into an RGB triple."""
    check_commas(line)
    parts = [part for part in line[1:].split(",") if part]
    if len(parts) < 3:
        raise ParseError("incomplete color input")
    if len(parts) > 3:
        raise ParseError("invalid color input")
    red, green, blue = (_colour_component(part) for part in parts)
    return (red, green, blue)


def _is_header(line: str) -> bool:
    return line == "" or line[:2] in _TEXTURE_KEYS or line[:1] in _COLOUR_KEYS


def _find_map_start(lines: list[str]) -> int:
    # The final line is never inspected here; it is taken as the map's start
    # when no earlier line begins the map.
    for index, line in enumerate(lines[:-1]):
        if _is_header(line):
            continue
        if is_map_row(line):
            return index
        raise ParseError("map or input invalid")
    return len(lines) - 1


def _texture_path(line: str) -> str:
    tokens = [token for token in line[2:].split(" ") if token]
    if not tokens:
        raise ParseError("missing texture path")
    if len(tokens) > 1:
        raise ParseError("path is not valid")
    path = tokens[0]
    match_extension(path, ".xpm")
    try:
        os.close(os.open(path, os.O_RDONLY))
    except OSError:
        raise ParseError("path is not valid") from None
    return path


def _parse_elements(headers: list[str]) -> dict:
    found: dict = {}
    colour_count = 0
    for line in headers:
        stripped = line.lstrip(" \t")
        if not stripped:
            continue
        texture = _TEXTURE_KEYS.get(stripped[:2])
        colour = _COLOUR_KEYS.get(stripped[:1])
        if texture is not None:
            if texture in found:
                raise ParseError("path already exists")
            found[texture] = _texture_path(line)
        elif colour is not None:
            if colour_count > 1:
                raise ParseError("too many colors")
            found[colour] = parse_color(line)
            colour_count += 1
    if any(name not in found for name in _ELEMENTS):
        raise ParseError("should have 4 texture and 2 color inputs")
    return found


def _collect_map(lines: list[str], first: int) -> tuple[str, ...]:
    if first == len(lines) - 1:
        raise ParseError("error in row")
    rows = lines[first:]
    if not all(is_map_row(row) for row in rows[1:]):
        raise ParseError("error in row")
    width = max(len(row) for row in rows)
    return tuple(row.ljust(width) for row in rows)


def parse_scene(text: str) -> SceneConfig:
    """Parse and validate the contents of a scene file.

    Texture paths are resolved against the current directory and must exist.
    Every line from the first map row to the end of the text, including
    the last, must be a non-empty map row.
    """
    lines = text.split("\n")
    first = _find_map_start(lines)
    elements = _parse_elements(lines[:first])
    grid = _collect_map(lines, first)
    camera = validate_map(grid)
    return SceneConfig(
        north=elements["north"],
        south=elements["south"],
        east=elements["east"],
        west=elements["west"],
        floor=elements["floor"],
        ceiling=elements["ceiling"],
        grid=grid,
        camera=camera,
    )


def read_scene(path: Union[str, os.PathLike]) -> SceneConfig:
    """Read a ``.cub`` file from disk and validate it."""
    name = os.fspath(path)
    match_extension(name, ".cub")
    try:
        data = Path(name).read_bytes()
    except OSError:
        raise ParseError("file cannot be opened") from None
    return parse_scene(data.decode("latin-1"))