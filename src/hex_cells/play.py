if __package__ is None or __package__ == "":
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import logging

import arcade

from hex_cells.config import FPS, LOG_LEVEL, SCREEN_HEIGHT, SCREEN_WIDTH, VSYNC, WINDOW_TITLE
import hex_cells.render as ui
from hex_cells.game import HexCellsGame
from hex_cells.input import ClearHex, HexKind, InputState, PlaceHex, RingDebug, ToggleRevealed
from hex_cells.runtime import ArcadeFrameClock, ArcadeWindowController, configure_logging

logger = logging.getLogger(__name__)

KEY_BINDINGS = {
    arcade.key.KEY_1: ClearHex(),
    arcade.key.KEY_2: PlaceHex(HexKind.EMPTY),
    arcade.key.KEY_3: PlaceHex(HexKind.MARKED),
    arcade.key.R: ToggleRevealed(),
    arcade.key.F2: RingDebug(),
}


def play_hex_cells():
    configure_logging(LOG_LEVEL)
    window_controller = ArcadeWindowController(SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE, vsync=VSYNC)
    window = window_controller.window

    frame_clock = ArcadeFrameClock()
    game = HexCellsGame()
    input_state = InputState()
    logger.info("Hex scale %.1f, board offset %s", game.scale, game.offset)

    while True:
        frame_clock.tick(FPS)
        if window_controller.poll_events():
            break

        for symbol in window_controller.consume_key_presses():
            action = KEY_BINDINGS.get(symbol)
            if action is not None:
                input_state.push(action)

        input_state.absolute_mouse_position = window_controller.mouse_position
        game.update(input_state)

        ui.draw_frame(window, game)
        window_controller.flip()

    window_controller.close()


if __name__ == "__main__":
    play_hex_cells()
