"""The single output shown when the compositor runs nested in a window."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .animation import Rectangle

REFRESH_MILLIHERTZ = 60_000


@dataclass(frozen=True)
class OutputMode:
    """A resolution in physical pixels and a refresh rate in millihertz."""

    width: int
    height: int
    refresh: int = REFRESH_MILLIHERTZ

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)


class Transform(Enum):
    """How the output's contents are rotated or flipped."""

    NORMAL = "normal"
    ROTATE_90 = "90"
    ROTATE_180 = "180"
    ROTATE_270 = "270"
    FLIPPED = "flipped"
    FLIPPED_90 = "flipped-90"
    FLIPPED_180 = "flipped-180"
    FLIPPED_270 = "flipped-270"


def _div(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def logical_size(width: int, height: int, scale: int) -> tuple[int, int]:
    """Convert a physical size to logical units at an integer ``scale``."""
    if scale == 0:
        raise ValueError("scale must not be zero")
    return (_div(width, scale), _div(height, scale))


@dataclass
class WinitOutput:
    """The output backing the nested window, and its current state."""

    name: str = "winit"
    make: str = "Smithay"
    model: str = "Winit"
    physical_size: tuple[int, int] = (0, 0)
    scale: int = 1
    mode: OutputMode | None = None
    preferred: OutputMode | None = None
    transform: Transform = Transform.NORMAL
    location: tuple[int, int] = (0, 0)

    def init(self, width: int, height: int) -> OutputMode:
        """Set up the output for a window of ``width`` x ``height`` pixels."""
        mode = OutputMode(width, height)
        self.mode = mode
        self.transform = Transform.FLIPPED_180
        self.location = (0, 0)
        self.preferred = mode
        return mode

    def resize(self, width: int, height: int) -> Rectangle:
        """Follow a window resize; returns the logical area left for windows."""
        self.mode = OutputMode(width, height)
        w, h = logical_size(width, height, self.scale)
        return Rectangle(0, 0, w, h)