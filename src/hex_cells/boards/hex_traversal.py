"""Ring and spiral walks over cube coordinates."""

from __future__ import annotations

from .hex_coords import Cube
from .hex_directions import CUBE_DIRECTIONS, cube_add, cube_neighbor, cube_scale

# The walk starts this many direction-table steps "behind" direction 0 so the
# six legs close the ring exactly.
_RING_START_DIRECTION = 4


def cube_ring(center: Cube, radius: int) -> list[Cube]:
    """Return the `6 * radius` hexes at exactly `radius` from `center`.

    Radius 0 yields an empty list; the center itself is never included.
    """

    results: list[Cube] = []
    if radius <= 0:
        return results

    cube = cube_add(center, cube_scale(CUBE_DIRECTIONS[_RING_START_DIRECTION], radius))
    for direction in range(6):
        for _ in range(radius):
            results.append(cube)
            cube = cube_neighbor(cube, direction)
    return results


def cube_spiral(center: Cube, max_radius: int) -> list[Cube]:
    """Concatenate rings 1..`max_radius` around `center`, innermost first."""

    results: list[Cube] = []
    for radius in range(1, max_radius + 1):
        results.extend(cube_ring(center, radius))
    return results


__all__ = ["cube_ring", "cube_spiral"]
