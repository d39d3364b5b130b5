"""Marked-neighbor counts for Empty cells that display a hint."""

import logging

from hex_cells.boards import axial_to_cube, cube_neighbors, cube_to_axial

logger = logging.getLogger(__name__)


def count_marked_neighbors(level, q, r):
    count = 0
    for neighbor in cube_neighbors(axial_to_cube((q, r))):
        neighbor_q, neighbor_r = cube_to_axial(neighbor)
        if level.is_marked(neighbor_q, neighbor_r):
            count += 1
    return count


def calculate_hints(level):
    """Recompute the count on every counting cell. Other cells keep stale values."""

    counting = level.counting_cells()
    for (q, r), cell in counting:
        cell.update_neighbors(count_marked_neighbors(level, q, r))
    logger.debug("Recomputed hints for %d counting cells", len(counting))
    return len(counting)
