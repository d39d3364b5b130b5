import pytest

from hex_cells.boards import HEX_BOARD_STANDARD, HexBoardSpec, hex_height, hex_width


def test_import_package():
    import hex_cells

    assert hex_cells.__version__


def test_standard_board_offset():
    ox, oy = HEX_BOARD_STANDARD.offset()
    assert ox == hex_width(48.0) * 2
    assert oy == hex_height(48.0) * 1.5


def test_board_spec_rejects_non_positive_scale():
    with pytest.raises(ValueError):
        HexBoardSpec(scale=0.0, origin_columns=1.0, origin_rows=1.0)
