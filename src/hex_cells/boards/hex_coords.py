"""Flat-top hex coordinate math: cube/axial conversion and pixel projection."""

from __future__ import annotations

import math

Axial = tuple[int, int]
AxialF = tuple[float, float]
Cube = tuple[int, int, int]
CubeF = tuple[float, float, float]
Pixel = tuple[float, float]

SQRT3 = math.sqrt(3.0)


def cube_to_axial(cube):
    """Drop the redundant cube component: `(x, y, z) -> (x, z)`."""

    x, _, z = cube
    return x, z


def axial_to_cube(axial):
    """Lift an axial pair into cube space; works for ints and floats."""

    q, r = axial
    return q, -q - r, r


def _round_half_away(value: float) -> int:
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def cube_round(cube_f: CubeF) -> Cube:
    """Round a fractional cube coordinate to the hex that contains it.

    The component with the largest rounding error is rebuilt from the other
    two so that `x + y + z == 0` holds exactly. Ties go to x, then y, then z.
    """

    fx, fy, fz = cube_f
    rx = _round_half_away(fx)
    ry = _round_half_away(fy)
    rz = _round_half_away(fz)

    x_diff = abs(rx - fx)
    y_diff = abs(ry - fy)
    z_diff = abs(rz - fz)

    if x_diff > y_diff and x_diff > z_diff:
        rx = -ry - rz
    elif y_diff > z_diff:
        ry = -rx - rz
    else:
        rz = -rx - ry

    return rx, ry, rz


def axial_round(axial_f: AxialF) -> Axial:
    """Round a fractional axial coordinate through cube space."""

    return cube_to_axial(cube_round(axial_to_cube(axial_f)))


def pixel_to_hex_fractional(pixel: Pixel, scale: float) -> AxialF:
    """Inverse flat-top projection, before rounding."""

    px, py = pixel
    q = (2.0 / 3.0 * px) / scale
    r = (-1.0 / 3.0 * px + SQRT3 / 3.0 * py) / scale
    return q, r


def pixel_to_hex(pixel: Pixel, scale: float) -> Axial:
    """Map a board-relative pixel to the axial coordinate of its hex."""

    return axial_round(pixel_to_hex_fractional(pixel, scale))


def hex_to_pixel(axial: Axial, scale: float) -> Pixel:
    """Pixel center of a flat-top hex, relative to the `(0, 0)` hex center."""

    q, r = axial
    x = scale * (3.0 / 2.0 * q)
    y = scale * (SQRT3 / 2.0 * q + SQRT3 * r)
    return x, y


def hex_width(scale: float) -> float:
    return 2.0 * scale


def hex_height(scale: float) -> float:
    return SQRT3 * scale


def hex_corner(center: Pixel, size: float, i: int) -> Pixel:
    """Corner `i` (0-5) of a flat-top hexagon, counted from the east vertex."""

    assert 0 <= i <= 5, "corner index must be between 0 and 5"

    angle_rad = math.radians(60.0 * i)
    cx, cy = center
    return cx + size * math.cos(angle_rad), cy + size * math.sin(angle_rad)


def hex_corners(center: Pixel, size: float) -> list[Pixel]:
    return [hex_corner(center, size, i) for i in range(6)]


__all__ = [
    "Axial",
    "AxialF",
    "Cube",
    "CubeF",
    "Pixel",
    "SQRT3",
    "cube_to_axial",
    "axial_to_cube",
    "cube_round",
    "axial_round",
    "pixel_to_hex_fractional",
    "pixel_to_hex",
    "hex_to_pixel",
    "hex_width",
    "hex_height",
    "hex_corner",
    "hex_corners",
]
