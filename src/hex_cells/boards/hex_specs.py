"""Hex board presets and rendering tuning."""

from dataclasses import dataclass
from typing import Final

from .hex_coords import Pixel, hex_height, hex_width


@dataclass(frozen=True)
class HexBoardSpec:
    """Scale and camera placement for an unbounded flat-top board."""

    scale: float
    origin_columns: float
    origin_rows: float

    def __post_init__(self):
        if self.scale <= 0:
            raise ValueError(f"hex scale must be positive, got {self.scale}")

    def offset(self) -> Pixel:
        """Screen position of the `(0, 0)` hex center."""

        return (
            hex_width(self.scale) * self.origin_columns,
            hex_height(self.scale) * self.origin_rows,
        )


@dataclass(frozen=True)
class HexRenderSpec:
    """Rendering tuning for hex-cell interfaces."""

    mesh_inset: float
    hover_brightness: float
    revealed_indicator_size_px: float
    revealed_indicator_bottom_px: float
    hint_text_scale: float
    edge_marker_glyph: str
    edge_marker_size_px: int


HEX_BOARD_STANDARD: Final[HexBoardSpec] = HexBoardSpec(
    scale=48.0,
    origin_columns=2.0,
    origin_rows=1.5,
)

HEX_RENDER_STANDARD: Final[HexRenderSpec] = HexRenderSpec(
    mesh_inset=0.95,
    hover_brightness=1.5,
    revealed_indicator_size_px=4.0,
    revealed_indicator_bottom_px=16.0,
    hint_text_scale=0.5,
    edge_marker_glyph="=",
    edge_marker_size_px=48,
)

__all__ = [
    "HexBoardSpec",
    "HexRenderSpec",
    "HEX_BOARD_STANDARD",
    "HEX_RENDER_STANDARD",
]
