"""Visual constants for Hex Cells."""

from .theme import (
    COLOR_BACKGROUND,
    COLOR_EDGE_MARKER,
    COLOR_EMPTY,
    COLOR_MARKED,
    COLOR_REVEALED_INDICATOR,
    COLOR_TEXT,
    COLOR_UNREVEALED,
    brighten,
    tile_color,
)

__all__ = [
    "COLOR_BACKGROUND",
    "COLOR_EDGE_MARKER",
    "COLOR_EMPTY",
    "COLOR_MARKED",
    "COLOR_REVEALED_INDICATOR",
    "COLOR_TEXT",
    "COLOR_UNREVEALED",
    "brighten",
    "tile_color",
]
