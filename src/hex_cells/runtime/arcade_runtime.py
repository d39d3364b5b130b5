"""Thin arcade wrappers driving a hand-rolled frame loop."""

from __future__ import annotations

import logging
import time

import arcade

logger = logging.getLogger(__name__)


class ArcadeWindowController:
    """Owns the arcade window and buffers its input events between frames."""

    def __init__(self, width: int, height: int, title: str, vsync: bool = False):
        self.width = int(width)
        self.height = int(height)
        self.window = arcade.Window(self.width, self.height, title, vsync=vsync)
        self._closed = False
        self._key_presses: list[int] = []
        self.mouse_position: tuple[float, float] = (0.0, 0.0)
        self.window.push_handlers(
            on_key_press=self._on_key_press,
            on_mouse_motion=self._on_mouse_motion,
            on_close=self._on_close,
        )
        logger.info("Opened %dx%d window %r", self.width, self.height, title)

    def _on_key_press(self, symbol, modifiers):
        self._key_presses.append(symbol)

    def _on_mouse_motion(self, x, y, dx, dy):
        self.mouse_position = (float(x), self.to_top_left_y(y))

    def _on_close(self):
        self._closed = True

    def to_top_left_y(self, y: float) -> float:
        return self.height - float(y)

    def poll_events(self) -> bool:
        """Pump window events; return True once the window was asked to close."""

        if not self._closed:
            self.window.dispatch_events()
        return self._closed

    def consume_key_presses(self) -> list[int]:
        presses = self._key_presses
        self._key_presses = []
        return presses

    def flip(self):
        self.window.flip()

    def close(self):
        if self.window is None:
            return
        if not self._closed:
            self._closed = True
            self.window.close()
        self.window = None
        logger.info("Window closed")


class ArcadeFrameClock:
    """Caps the loop at a target frame rate and reports elapsed seconds."""

    def __init__(self):
        self._last = time.perf_counter()

    def tick(self, fps: int) -> float:
        if fps > 0:
            remaining = 1.0 / fps - (time.perf_counter() - self._last)
            if remaining > 0:
                time.sleep(remaining)
        now = time.perf_counter()
        dt_seconds = now - self._last
        self._last = now
        return dt_seconds


class TextCache:
    """Reuses `arcade.Text` objects, which are expensive to lay out."""

    def __init__(self, max_entries: int = 1024):
        self.max_entries = int(max_entries)
        self._entries: dict[tuple, arcade.Text] = {}

    def get_text(self, text, color, font_size, font_name, anchor_x="center", anchor_y="center"):
        key = (text, tuple(color), font_size, font_name, anchor_x, anchor_y)
        cached = self._entries.get(key)
        if cached is not None:
            return cached
        # Labels are a handful of digits plus the edge glyph; a full reset is enough.
        if len(self._entries) >= self.max_entries:
            self._entries.clear()

        text_obj = arcade.Text(
            text,
            0,
            0,
            color,
            font_size=font_size,
            font_name=font_name,
            anchor_x=anchor_x,
            anchor_y=anchor_y,
        )
        self._entries[key] = text_obj
        return text_obj
