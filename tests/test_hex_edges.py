import math

import pytest

from hex_cells.boards import (
    axial_neighbor,
    hex_to_pixel,
    nearest_edge_hex,
    nearest_edge_neighbor,
    nearest_neighbor_direction,
)


def test_dead_center_resolves_to_first_direction():
    scale = 48.0
    assert nearest_neighbor_direction((0.0, 0.0), scale) == 0

    x, y = nearest_edge_hex((0.0, 0.0), scale)
    assert x == pytest.approx(36.0)
    assert y == pytest.approx(scale * math.sqrt(3) / 4.0)


@pytest.mark.parametrize("direction", range(6))
def test_cursor_leaning_toward_neighbor(direction):
    scale = 10.0
    origin = (-2, 1)
    neighbor = axial_neighbor(origin, direction)
    cx, cy = hex_to_pixel(origin, scale)
    nx, ny = hex_to_pixel(neighbor, scale)
    cursor = (cx + 0.4 * (nx - cx), cy + 0.4 * (ny - cy))

    assert nearest_neighbor_direction(cursor, scale) == direction
    assert nearest_edge_neighbor(cursor, scale) == (origin, neighbor)

    x, y = nearest_edge_hex(cursor, scale)
    assert x == pytest.approx((cx + nx) / 2.0)
    assert y == pytest.approx((cy + ny) / 2.0)


@pytest.mark.parametrize("scale", [10.0, 48.0, 64.0])
def test_every_hex_center_resolves_to_first_direction(scale):
    for q in range(-10, 11):
        for r in range(-10, 11):
            center = hex_to_pixel((q, r), scale)
            assert nearest_neighbor_direction(center, scale) == 0
            assert nearest_edge_neighbor(center, scale) == ((q, r), axial_neighbor((q, r), 0))
