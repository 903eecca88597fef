"""Bresenham line rasterisation."""

from __future__ import annotations

from typing import Iterator

from raycub.image import Image

Point = tuple[int, int]


def _shallow(a0: int, b0: int, a1: int, b1: int) -> Iterator[Point]:
    da = a1 - a0
    db = b1 - b0
    step = -1 if db < 0 else 1
    db = abs(db)
    error = 2 * db - da
    b = b0
    for a in range(a0, a1 + 1):
        yield a, b
        if error > 0:
            b += step
            error += 2 * (db - da)
        else:
            error += 2 * db


def line_points(start: Point, end: Point) -> Iterator[Point]:
    """Yield the pixels of the line between two points, endpoints included."""
    (x0, y0), (x1, y1) = start, end
    if abs(y1 - y0) < abs(x1 - x0):
        if x0 > x1:
            x0, y0, x1, y1 = x1, y1, x0, y0
        yield from _shallow(x0, y0, x1, y1)
    else:
        if y0 > y1:
            x0, y0, x1, y1 = x1, y1, x0, y0
        for y, x in _shallow(y0, x0, y1, x1):
            yield x, y


def plot_line(image: Image, start: Point, end: Point, colour: int) -> None:
    """Draw a line on ``image``; pixels outside it are dropped."""
    for x, y in line_points(start, end):
        image.put_pixel(x, y, colour)