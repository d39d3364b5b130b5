"""Nearest shared edge between the hovered hex and one of its neighbors."""

from __future__ import annotations

from .hex_coords import (
    Axial,
    Pixel,
    axial_round,
    axial_to_cube,
    cube_to_axial,
    hex_to_pixel,
    pixel_to_hex_fractional,
)
from .hex_directions import CUBE_DIRECTIONS, cube_add

# Projection round-trips leave ~1e-15 of noise; distances closer than this tie.
_DISTANCE_EPSILON = 1e-9


def nearest_neighbor_direction(pixel: Pixel, scale: float) -> int:
    """Index of the neighbor whose center is closest to `pixel` in cube space.

    Equal distances resolve to the earliest entry of the direction table.
    """

    axial_f = pixel_to_hex_fractional(pixel, scale)
    cube_f = axial_to_cube(axial_f)
    cube = axial_to_cube(axial_round(axial_f))

    nearest_direction = 0
    smallest_distance = float("inf")
    for direction, step in enumerate(CUBE_DIRECTIONS):
        nx, ny, nz = cube_add(cube, step)
        distance = (nx - cube_f[0]) ** 2 + (ny - cube_f[1]) ** 2 + (nz - cube_f[2]) ** 2
        if distance < smallest_distance - _DISTANCE_EPSILON:
            nearest_direction = direction
            smallest_distance = distance
    return nearest_direction


def nearest_edge_neighbor(pixel: Pixel, scale: float) -> tuple[Axial, Axial]:
    """Return `(hovered_hex, nearest_neighbor)` as axial coordinates."""

    axial = axial_round(pixel_to_hex_fractional(pixel, scale))
    step = CUBE_DIRECTIONS[nearest_neighbor_direction(pixel, scale)]
    neighbor = cube_to_axial(cube_add(axial_to_cube(axial), step))
    return axial, neighbor


def nearest_edge_hex(pixel: Pixel, scale: float) -> Pixel:
    """Pixel midpoint between the hovered hex center and its nearest neighbor's."""

    axial, neighbor = nearest_edge_neighbor(pixel, scale)
    cx, cy = hex_to_pixel(axial, scale)
    nx, ny = hex_to_pixel(neighbor, scale)
    return (cx + nx) / 2.0, (cy + ny) / 2.0


__all__ = ["nearest_neighbor_direction", "nearest_edge_neighbor", "nearest_edge_hex"]
