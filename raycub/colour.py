"""Packed 32-bit ARGB colours and angle helpers."""

from __future__ import annotations

_MASK = 0xFFFFFFFF


def make_colour(r: int, g: int, b: int, a: int) -> int:
    """Pack red, green, blue and alpha bytes into one ``0xAARRGGBB`` value."""
    return (((a & 0xFF) << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)) & _MASK


def adjust_brightness(colour: int, percent: float) -> int:
    """Darken a colour by ``percent`` when it is below 1.0.

    Blue, green and alpha bytes are scaled; the red byte is left as is.
    """
    colour &= _MASK
    if percent >= 1.0:
        return colour
    result = colour & 0x00FF0000
    for shift in (0, 8, 24):
        byte = (colour >> shift) & 0xFF
        result |= (int(percent * byte) & 0xFF) << shift
    return result


def normalize_angle(angle: float) -> float:
    """Fold an angle in degrees into the range [0, 360)."""
    angle = angle - int(angle / 360) * 360
    if angle < 0:
        angle += 360
    return angle