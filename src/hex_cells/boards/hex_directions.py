"""Fixed-order direction tables for flat-top hex neighbors.

Ring traversal, nearest-edge tie-breaks and hint counting all depend on this
exact ordering. Index `i` in the cube table and the axial table describe the
same geometric step.
"""

from __future__ import annotations

from typing import Final

from .hex_coords import Axial, Cube

CUBE_DIRECTIONS: Final[tuple[Cube, ...]] = (
    (1, -1, 0),
    (1, 0, -1),
    (0, 1, -1),
    (-1, 1, 0),
    (-1, 0, 1),
    (0, -1, 1),
)

AXIAL_DIRECTIONS: Final[tuple[Axial, ...]] = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
)


def opposite_direction(direction: int) -> int:
    return (direction + 3) % 6


def cube_add(a: Cube, b: Cube) -> Cube:
    return a[0] + b[0], a[1] + b[1], a[2] + b[2]


def cube_scale(cube: Cube, factor: int) -> Cube:
    return cube[0] * factor, cube[1] * factor, cube[2] * factor


def cube_neighbor(cube: Cube, direction: int) -> Cube:
    return cube_add(cube, CUBE_DIRECTIONS[direction])


def cube_neighbors(cube: Cube) -> list[Cube]:
    """Return the six cube neighbors in direction-table order."""

    return [cube_add(cube, step) for step in CUBE_DIRECTIONS]


def axial_neighbor(axial: Axial, direction: int) -> Axial:
    dq, dr = AXIAL_DIRECTIONS[direction]
    return axial[0] + dq, axial[1] + dr


def axial_neighbors(axial: Axial) -> list[Axial]:
    """Return the six axial neighbors in direction-table order."""

    return [axial_neighbor(axial, direction) for direction in range(6)]


__all__ = [
    "CUBE_DIRECTIONS",
    "AXIAL_DIRECTIONS",
    "opposite_direction",
    "cube_add",
    "cube_scale",
    "cube_neighbor",
    "cube_neighbors",
    "axial_neighbor",
    "axial_neighbors",
]
