import pytest

from hex_cells.level import EmptyTile, HexCell, HexLevel, MarkedTile
from hex_cells.visual import COLOR_EMPTY, COLOR_MARKED, COLOR_UNREVEALED, brighten, tile_color


def test_set_get_and_replace():
    level = HexLevel()
    first = level.set_cell(1, 2, HexCell(EmptyTile()))
    assert level.get_cell(1, 2) is first
    assert (1, 2) in level

    second = level.set_cell(1, 2, HexCell(MarkedTile()))
    assert level.get_cell(1, 2) is second
    assert len(level) == 1


def test_remove_absent_is_noop():
    level = HexLevel()
    assert level.remove_cell(4, 4) is None
    level.set_cell(4, 4, HexCell(EmptyTile()))
    assert level.remove_cell(4, 4) is not None
    assert level.get_cell(4, 4) is None
    assert len(level) == 0


def test_is_marked():
    level = HexLevel()
    level.set_cell(0, 0, HexCell(MarkedTile()))
    level.set_cell(1, 0, HexCell(EmptyTile()))
    assert level.is_marked(0, 0)
    assert not level.is_marked(1, 0)
    assert not level.is_marked(9, 9)


def test_counting_cells_only_lists_counting_empties():
    level = HexLevel()
    level.set_cell(0, 0, HexCell(EmptyTile(show_neighbor_count=True)))
    level.set_cell(1, 0, HexCell(EmptyTile(show_neighbor_count=False)))
    level.set_cell(2, 0, HexCell(MarkedTile()))
    assert [coord for coord, _ in level.counting_cells()] == [(0, 0)]


def test_new_cell_defaults():
    cell = HexCell(EmptyTile())
    assert cell.tile.show_neighbor_count
    assert not cell.start_revealed
    assert not cell.revealed
    assert cell.neighbors_str() == "0"
    assert not HexCell(MarkedTile()).tile.show_around


def test_neighbor_count_out_of_range_is_a_defect():
    cell = HexCell(EmptyTile())
    with pytest.raises(AssertionError):
        cell.update_neighbors(7)
    cell.marked_neighbor_count = 7
    with pytest.raises(AssertionError):
        cell.neighbors_str()


def test_unknown_tile_rejected():
    with pytest.raises(TypeError):
        HexCell("marked")


def test_tile_colors():
    assert tile_color(EmptyTile(), revealed=False) == COLOR_UNREVEALED
    assert tile_color(MarkedTile(), revealed=False) == COLOR_UNREVEALED
    assert tile_color(EmptyTile(), revealed=True) == COLOR_EMPTY
    assert tile_color(MarkedTile(), revealed=True) == COLOR_MARKED


def test_brighten_clamps():
    assert brighten((100, 200, 10), 1.5) == (150, 255, 15)
