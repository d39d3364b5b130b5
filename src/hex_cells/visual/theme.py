"""Palette and tile colours used by Hex Cells."""

from typing import Final

from hex_cells.level import EmptyTile, MarkedTile

Rgb = tuple[int, int, int]

COLOR_BACKGROUND: Final[Rgb] = (26, 26, 26)
COLOR_UNREVEALED: Final[Rgb] = (94, 94, 94)
COLOR_EMPTY: Final[Rgb] = (245, 129, 15)
COLOR_MARKED: Final[Rgb] = (15, 136, 245)
COLOR_TEXT: Final[Rgb] = (255, 255, 255)
COLOR_REVEALED_INDICATOR: Final[Rgb] = (255, 255, 255)
COLOR_EDGE_MARKER: Final[Rgb] = (0, 0, 255)


def tile_color(tile, revealed):
    if not revealed:
        return COLOR_UNREVEALED
    if isinstance(tile, EmptyTile):
        return COLOR_EMPTY
    if isinstance(tile, MarkedTile):
        return COLOR_MARKED
    raise TypeError(f"unsupported tile: {tile!r}")


def brighten(color: Rgb, factor: float) -> Rgb:
    return tuple(max(0, min(255, int(round(channel * factor)))) for channel in color)
