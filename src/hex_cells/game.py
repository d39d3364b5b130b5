import logging

from hex_cells.boards import (
    HEX_BOARD_STANDARD,
    axial_to_cube,
    cube_spiral,
    cube_to_axial,
    nearest_edge_hex,
    pixel_to_hex,
)
from hex_cells.config import DEBUG_RING_RADIUS
from hex_cells.hints import calculate_hints
from hex_cells.input import ClearHex, HexKind, PlaceHex, RingDebug, ToggleRevealed
from hex_cells.level import EmptyTile, HexCell, HexLevel, MarkedTile

logger = logging.getLogger(__name__)


class HexCellsGame:
    def __init__(self, board_spec=HEX_BOARD_STANDARD, level=None):
        self.board_spec = board_spec
        self.level = level if level is not None else HexLevel()
        self.scale = board_spec.scale
        self.offset = board_spec.offset()
        self.cursor_hex_position = (0, 0)
        self.nearest_edge = (0.0, 0.0)

    @staticmethod
    def new_cell(kind):
        if kind == HexKind.EMPTY:
            return HexCell(EmptyTile(show_neighbor_count=True))
        if kind == HexKind.MARKED:
            return HexCell(MarkedTile(show_around=False))
        raise ValueError(f"unknown hex kind: {kind!r}")

    def update(self, input_state):
        """Run one tick: track the cursor, apply queued actions, refresh hints."""

        ax, ay = input_state.absolute_mouse_position
        ox, oy = self.offset
        input_state.mouse_position = (ax - ox, ay - oy)

        self.cursor_hex_position = pixel_to_hex(input_state.mouse_position, self.scale)
        self.nearest_edge = nearest_edge_hex(input_state.mouse_position, self.scale)

        invalidated = False
        for action in input_state.drain():
            invalidated = self._apply_action(action) or invalidated

        if invalidated:
            calculate_hints(self.level)
        return invalidated

    def _apply_action(self, action):
        q, r = self.cursor_hex_position

        if isinstance(action, PlaceHex):
            self.level.set_cell(q, r, self.new_cell(action.kind))
            logger.debug("Placed %s hex at %s", action.kind.value, (q, r))
            return True

        if isinstance(action, ClearHex):
            removed = self.level.remove_cell(q, r)
            logger.debug("Cleared hex at %s (present=%s)", (q, r), removed is not None)
            return True

        if isinstance(action, ToggleRevealed):
            cell = self.level.get_cell(q, r)
            if cell is not None:
                cell.toggle_start_revealed()
                logger.debug("Hex at %s start_revealed=%s", (q, r), cell.start_revealed)
            return False

        if isinstance(action, RingDebug):
            ring = cube_spiral(axial_to_cube((q, r)), DEBUG_RING_RADIUS)
            for cube in ring:
                ring_q, ring_r = cube_to_axial(cube)
                self.level.set_cell(ring_q, ring_r, HexCell(EmptyTile(show_neighbor_count=False)))
            logger.debug("Filled %d hexes around %s", len(ring), (q, r))
            return True

        raise TypeError(f"unsupported input action: {action!r}")
