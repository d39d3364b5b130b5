from hex_cells.hints import calculate_hints, count_marked_neighbors
from hex_cells.level import EmptyTile, HexCell, HexLevel, MarkedTile


def test_counts_follow_marked_neighbors():
    level = HexLevel()
    level.set_cell(0, 0, HexCell(MarkedTile()))
    counting = level.set_cell(1, -1, HexCell(EmptyTile()))

    calculate_hints(level)
    assert counting.marked_neighbor_count == 1

    level.set_cell(0, -1, HexCell(MarkedTile()))
    calculate_hints(level)
    assert counting.marked_neighbor_count == 2
    assert counting.neighbors_str() == "2"


def test_fully_surrounded_cell_counts_six():
    level = HexLevel()
    center = level.set_cell(0, 0, HexCell(EmptyTile()))
    for q, r in [(1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1)]:
        level.set_cell(q, r, HexCell(MarkedTile()))
    level.set_cell(2, 0, HexCell(MarkedTile()))

    assert calculate_hints(level) == 1
    assert center.marked_neighbor_count == 6


def test_non_counting_cells_are_untouched():
    level = HexLevel()
    level.set_cell(0, 0, HexCell(MarkedTile()))
    silent = level.set_cell(1, 0, HexCell(EmptyTile(show_neighbor_count=False)))
    silent.marked_neighbor_count = 3

    calculate_hints(level)
    assert silent.marked_neighbor_count == 3
    assert count_marked_neighbors(level, 1, 0) == 1
