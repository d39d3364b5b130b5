"""Discrete input actions queued by the front end and drained by the game."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum


class HexKind(Enum):
    EMPTY = "empty"
    MARKED = "marked"


@dataclass(frozen=True)
class PlaceHex:
    kind: HexKind


@dataclass(frozen=True)
class ClearHex:
    pass


@dataclass(frozen=True)
class ToggleRevealed:
    pass


@dataclass(frozen=True)
class RingDebug:
    pass


InputAction = PlaceHex | ClearHex | ToggleRevealed | RingDebug


@dataclass
class InputState:
    """Cursor position in absolute screen pixels plus a FIFO action queue."""

    action_queue: deque = field(default_factory=deque)
    absolute_mouse_position: tuple[float, float] = (0.0, 0.0)
    mouse_position: tuple[float, float] = (0.0, 0.0)

    def push(self, action: InputAction) -> None:
        self.action_queue.append(action)

    def drain(self):
        while self.action_queue:
            yield self.action_queue.popleft()


__all__ = [
    "HexKind",
    "PlaceHex",
    "ClearHex",
    "ToggleRevealed",
    "RingDebug",
    "InputAction",
    "InputState",
]
