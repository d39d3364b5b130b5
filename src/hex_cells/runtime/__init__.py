"""Runtime helpers for Hex Cells."""

from .helpers import configure_logging

try:
    from .arcade_runtime import ArcadeFrameClock, ArcadeWindowController, TextCache
except ModuleNotFoundError:
    pass

__all__ = [
    "ArcadeFrameClock",
    "ArcadeWindowController",
    "TextCache",
    "configure_logging",
]
