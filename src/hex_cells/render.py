"""Arcade-based rendering for Hex Cells."""

from __future__ import annotations

import arcade

from hex_cells.boards import HEX_RENDER_STANDARD, hex_corners, hex_height, hex_to_pixel
from hex_cells.config import EDITOR_REVEAL_ALL, FONT_NAME_HINTS, SCREEN_HEIGHT
from hex_cells.runtime import TextCache
from hex_cells.visual import (
    COLOR_BACKGROUND,
    COLOR_EDGE_MARKER,
    COLOR_REVEALED_INDICATOR,
    COLOR_TEXT,
    brighten,
    tile_color,
)

_TEXT_CACHE = TextCache(max_entries=512)


def draw_frame(window, game, render_spec=HEX_RENDER_STANDARD):
    window.clear(color=COLOR_BACKGROUND)
    ox, oy = game.offset
    scale = game.scale
    cells = game.level.items()

    for coord, cell in cells:
        center = _screen_center(coord, scale, ox, oy)
        color = tile_color(cell.tile, cell.revealed or EDITOR_REVEAL_ALL)
        if coord == game.cursor_hex_position:
            color = brighten(color, render_spec.hover_brightness)
        points = hex_corners(center, scale * render_spec.mesh_inset)
        arcade.draw_polygon_filled(_to_arcade_points(points), color)

    for coord, cell in cells:
        if cell.start_revealed:
            _draw_revealed_indicator(coord, scale, ox, oy, render_spec)

    for coord, cell in cells:
        if cell.shows_neighbor_count:
            x, y = _screen_center(coord, scale, ox, oy)
            _draw_label(cell.neighbors_str(), x, y, COLOR_TEXT, int(scale * render_spec.hint_text_scale))

    _draw_edge_marker(game, render_spec)


def _screen_center(coord, scale, ox, oy):
    x, y = hex_to_pixel(coord, scale)
    return x + ox, y + oy


def _draw_revealed_indicator(coord, scale, ox, oy, render_spec):
    x, y = _screen_center(coord, scale, ox, oy)
    indicator_y = y + hex_height(scale) / 2.0 - render_spec.revealed_indicator_bottom_px
    size = render_spec.revealed_indicator_size_px * render_spec.mesh_inset
    points = hex_corners((x, indicator_y), size)
    arcade.draw_polygon_filled(_to_arcade_points(points), COLOR_REVEALED_INDICATOR)


def _draw_edge_marker(game, render_spec):
    ex, ey = game.nearest_edge
    ox, oy = game.offset
    _draw_label(
        render_spec.edge_marker_glyph,
        ex + ox,
        ey + oy,
        COLOR_EDGE_MARKER,
        render_spec.edge_marker_size_px,
    )


def _draw_label(text, x, y, color, font_size):
    text_obj = _TEXT_CACHE.get_text(
        text=text,
        color=color,
        font_size=max(1, int(font_size)),
        font_name=FONT_NAME_HINTS,
    )
    text_obj.x = x
    text_obj.y = _to_arcade_y(y)
    text_obj.draw()


def _to_arcade_y(y_top: float) -> float:
    return SCREEN_HEIGHT - y_top


def _to_arcade_points(points):
    return [(px, _to_arcade_y(py)) for px, py in points]
