from dataclasses import dataclass

MAX_NEIGHBOR_COUNT = 6


@dataclass(frozen=True)
class EmptyTile:
    """Safe tile, optionally showing how many marked tiles surround it."""

    show_neighbor_count: bool = True


@dataclass(frozen=True)
class MarkedTile:
    """Flagged tile."""

    show_around: bool = False


Tile = EmptyTile | MarkedTile


class HexCell:
    def __init__(self, tile):
        if not isinstance(tile, Tile):
            raise TypeError(f"unsupported tile: {tile!r}")
        self.tile = tile
        self.start_revealed = False
        self.revealed = False
        self.marked_neighbor_count = 0

    @property
    def is_marked(self):
        return isinstance(self.tile, MarkedTile)

    @property
    def shows_neighbor_count(self):
        return isinstance(self.tile, EmptyTile) and self.tile.show_neighbor_count

    def toggle_start_revealed(self):
        self.start_revealed = not self.start_revealed

    def update_neighbors(self, count):
        assert 0 <= count <= MAX_NEIGHBOR_COUNT, f"impossible neighbor count {count}"
        self.marked_neighbor_count = count

    def neighbors_str(self):
        count = self.marked_neighbor_count
        assert 0 <= count <= MAX_NEIGHBOR_COUNT, f"impossible neighbor count {count}"
        return str(count)

    def __repr__(self):
        return (
            f"HexCell({self.tile!r}, start_revealed={self.start_revealed}, "
            f"marked_neighbor_count={self.marked_neighbor_count})"
        )


class HexLevel:
    """Sparse, unbounded map from axial coordinate to `HexCell`."""

    def __init__(self):
        self.cells = {}

    def __len__(self):
        return len(self.cells)

    def __contains__(self, coord):
        return tuple(coord) in self.cells

    def set_cell(self, q, r, cell):
        self.cells[(q, r)] = cell
        return cell

    def remove_cell(self, q, r):
        return self.cells.pop((q, r), None)

    def get_cell(self, q, r):
        return self.cells.get((q, r))

    def is_marked(self, q, r):
        cell = self.cells.get((q, r))
        return cell is not None and cell.is_marked

    def items(self):
        return list(self.cells.items())

    def counting_cells(self):
        return [(coord, cell) for coord, cell in self.cells.items() if cell.shows_neighbor_count]
