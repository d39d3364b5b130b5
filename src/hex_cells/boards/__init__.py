"""Hex board helpers."""

from .hex_coords import (
    axial_round,
    axial_to_cube,
    cube_round,
    cube_to_axial,
    hex_corner,
    hex_corners,
    hex_height,
    hex_to_pixel,
    hex_width,
    pixel_to_hex,
    pixel_to_hex_fractional,
)
from .hex_directions import (
    AXIAL_DIRECTIONS,
    CUBE_DIRECTIONS,
    axial_neighbor,
    axial_neighbors,
    cube_neighbor,
    cube_neighbors,
    opposite_direction,
)
from .hex_edges import nearest_edge_hex, nearest_edge_neighbor, nearest_neighbor_direction
from .hex_specs import HEX_BOARD_STANDARD, HEX_RENDER_STANDARD, HexBoardSpec, HexRenderSpec
from .hex_traversal import cube_ring, cube_spiral

__all__ = [
    "AXIAL_DIRECTIONS",
    "CUBE_DIRECTIONS",
    "HEX_BOARD_STANDARD",
    "HEX_RENDER_STANDARD",
    "HexBoardSpec",
    "HexRenderSpec",
    "axial_neighbor",
    "axial_neighbors",
    "axial_round",
    "axial_to_cube",
    "cube_neighbor",
    "cube_neighbors",
    "cube_ring",
    "cube_round",
    "cube_spiral",
    "cube_to_axial",
    "hex_corner",
    "hex_corners",
    "hex_height",
    "hex_to_pixel",
    "hex_width",
    "nearest_edge_hex",
    "nearest_edge_neighbor",
    "nearest_neighbor_direction",
    "opposite_direction",
    "pixel_to_hex",
    "pixel_to_hex_fractional",
]
