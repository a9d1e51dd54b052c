"""Pointer grabs for moving and resizing windows with the main modifier held."""

from __future__ import annotations

import math
from collections.abc import Callable, Collection, Hashable
from dataclasses import dataclass, field
from typing import Any

from .animation import Rectangle

# Linux input event code of the left mouse button.
BTN_LEFT = 0x110


def _round(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass
class MoveGrab:
    """Follows the pointer while a window is being dragged."""

    start_location: tuple[float, float]
    window: Hashable
    initial_window_location: tuple[int, int]
    active: bool = True

    def motion(self, location: tuple[float, float]) -> tuple[int, int]:
        """Move with the pointer to ``location``; returns the window's new location."""
        dx = location[0] - self.start_location[0]
        dy = location[1] - self.start_location[1]
        x, y = self.initial_window_location
        self.initial_window_location = (x + _round(dx), y + _round(dy))
        self.start_location = location
        return self.initial_window_location

    def button(self, pressed_buttons: Collection[int]) -> bool:
        """Update on a button event; returns True once the grab is released."""
        if BTN_LEFT not in pressed_buttons:
            self.active = False
            return True
        return False


@dataclass
class ResizeGrab:
    """Marks a window as being resized for as long as the pointer is held."""

    start_location: tuple[float, float]
    window: Hashable
    edges: Any
    initial_rect: Rectangle
    on_configure: Callable[[bool], None] | None = None
    resizing: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self._set_resizing(True)

    def _set_resizing(self, value: bool) -> None:
        self.resizing = value
        if self.on_configure is not None:
            self.on_configure(value)

    def motion(self, location: tuple[float, float]) -> None:
        """Follow the pointer to ``location``."""
        self.start_location = location

    def button(self, pressed_buttons: Collection[int]) -> bool:
        """Update on a button event; returns True once the grab is released."""
        if BTN_LEFT in pressed_buttons:
            return False
        self.unset()
        self._set_resizing(False)
        return True

    def unset(self) -> None:
        """End the grab: the window is no longer resizing."""
        self._set_resizing(False)