"""Closed-map validation and camera discovery for scene grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

CAMERA_CHARS = "WESN"

_HEADINGS = {"E": 0, "N": 90, "W": 180, "S": 270}


class ParseError(ValueError):
    """Raised when a scene file or its map grid is invalid."""


@dataclass(frozen=True)
class CameraStart:
    """Grid cell holding the camera and the heading it faces, in degrees."""

    row: int
    col: int
    direction: int

    @property
    def x(self) -> float:
        """Horizontal position of the cell centre, in map units."""
        return self.col + 0.5

    @property
    def y(self) -> float:
        """Vertical position of the cell centre, in map units."""
        return self.row + 0.5


def _is_open(cell: str) -> bool:
    return cell == "0" or (len(cell) == 1 and cell in CAMERA_CHARS)


def _check_edge_row(row: str) -> None:
    if any(_is_open(cell) for cell in row):
        raise ParseError("invalid map")


def _check_border_cell(row: str, col: int) -> None:
    if col < len(row) and _is_open(row[col]):
        raise ParseError("invalid map")


def validate_map(grid: Sequence[str]) -> CameraStart:
    """Check that the map is closed by walls and holds exactly one camera.

    Rows shorter than the widest row are padded with spaces, which count
    as outside the map.
    """
    if not grid:
        raise ParseError("no camera on the map")
    width = max(len(row) for row in grid)
    rows = [row.ljust(width) for row in grid]

    camera: CameraStart | None = None
    _check_edge_row(rows[0])
    for i in range(1, len(rows) - 1):
        above, row, below = rows[i - 1], rows[i], rows[i + 1]
        _check_border_cell(row, 0)
        for j in range(1, width - 1):
            cell = row[j]
            if not _is_open(cell):
                continue
            neighbours = above[j - 1 : j + 2] + row[j - 1] + row[j + 1] + below[j - 1 : j + 2]
            if " " in neighbours:
                raise ParseError("invalid map")
            if cell in CAMERA_CHARS:
                if camera is not None:
                    raise ParseError("camera is unique")
                camera = CameraStart(i, j, _HEADINGS[cell])
        _check_border_cell(row, max(1, width - 1))
    _check_edge_row(rows[-1])

    if camera is None:
        raise ParseError("no camera on the map")
    return camera