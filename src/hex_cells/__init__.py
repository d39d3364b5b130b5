"""Hex Cells: a hexagonal minesweeper-style level editor."""

from .game import HexCellsGame
from .level import EmptyTile, HexCell, HexLevel, MarkedTile

__version__ = "0.1.0"

__all__ = ["EmptyTile", "HexCell", "HexCellsGame", "HexLevel", "MarkedTile", "__version__"]
