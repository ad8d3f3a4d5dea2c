"""Mouse state: position, pressed buttons, double clicks and modifiers."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional

DOUBLE_CLICK_TIME = 0.3
"""Largest delay, in seconds, between two presses forming a double click."""

BUTTON_COUNT = 3


class ButtonAction(IntEnum):
    RELEASE = 0
    PRESS = 1


def _per_button(value) -> List:
    return [value] * BUTTON_COUNT


@dataclass
class Mouse:
    """The state of a three button mouse."""

    x: float = 0.0
    y: float = 0.0
    is_pressed: List[bool] = field(default_factory=lambda: _per_button(False))
    is_double_click: List[bool] = field(default_factory=lambda: _per_button(False))
    last_click_x: List[float] = field(default_factory=lambda: _per_button(0.0))
    last_click_y: List[float] = field(default_factory=lambda: _per_button(0.0))
    last_click_time: List[float] = field(default_factory=lambda: _per_button(0.0))
    mods: List[int] = field(default_factory=lambda: _per_button(0))

    def record_button(
        self, button: int, action: int, mods: int, now: Optional[float] = None
    ) -> None:
        """Record a press or release of button; other actions are ignored.

        ``now`` is the event time in seconds, the monotonic clock by default.
        """
        if action not in (ButtonAction.PRESS, ButtonAction.RELEASE):
            return
        if not 0 <= button < BUTTON_COUNT:
            raise ValueError(f"button {button!r} out of range 0..{BUTTON_COUNT - 1}")
        if action == ButtonAction.RELEASE:
            self.is_pressed[button] = False
            return
        if now is None:
            now = time.monotonic()
        self.is_pressed[button] = True
        self.is_double_click[button] = (
            now - self.last_click_time[button]
        ) < DOUBLE_CLICK_TIME
        self.last_click_x[button] = self.x
        self.last_click_y[button] = self.y
        self.last_click_time[button] = now
        self.mods[button] = mods

    def record_move(self, x: float, y: float) -> None:
        """Record the pointer position."""
        self.x = x
        self.y = y