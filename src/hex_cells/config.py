"""Runtime constants for Hex Cells."""

from typing import Final

from hex_cells.boards import HEX_BOARD_STANDARD

SCREEN_WIDTH: Final[int] = 1600
SCREEN_HEIGHT: Final[int] = 900
WINDOW_TITLE: Final[str] = "Hex Cells"
FPS: Final[int] = 60
VSYNC: Final[bool] = False

HEX_SCALE: Final[float] = HEX_BOARD_STANDARD.scale
DEBUG_RING_RADIUS: Final[int] = 1

# Draw every cell as revealed while authoring levels.
EDITOR_REVEAL_ALL: Final[bool] = True

FONT_NAME_HINTS: Final[tuple[str, ...]] = ("Arial", "Calibri")

LOG_LEVEL: Final[str] = "INFO"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"
