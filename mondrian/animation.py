"""Rectangle animations with easing curves."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum, auto

_TICK = timedelta(milliseconds=1)


@dataclass(frozen=True)
class Rectangle:
    """An integer rectangle in logical coordinates."""

    x: int
    y: int
    width: int
    height: int

    @property
    def loc(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)


class AnimationType(Enum):
    """Easing curve applied to an animation's progress."""

    LINEAR = auto()
    EASE_IN_OUT_QUAD = auto()
    OVERSHOOT_BOUNCE = auto()

    def get_progress(self, t: float) -> float:
        """Map linear progress ``t`` (clamped to [0, 1]) through the curve."""
        t = min(max(t, 0.0), 1.0)
        if self is AnimationType.LINEAR:
            return t
        if self is AnimationType.EASE_IN_OUT_QUAD:
            if t < 0.5:
                return 2.0 * t * t
            return -1.0 + (4.0 - 2.0 * t) * t
        c1 = 1.70158
        c3 = c1 + 1.0
        return 1.0 + c3 * (t - 1.0) ** 3 + c1 * (t - 1.0) ** 2


class AnimationState(Enum):
    NOT_STARTED = auto()
    RUNNING = auto()
    COMPLETED = auto()


def _round(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def interpolate(start: Rectangle, end: Rectangle, progress: float) -> Rectangle:
    """The rectangle ``progress`` of the way from ``start`` to ``end``."""

    def lerp(a: int, b: int) -> int:
        return _round(a + (b - a) * progress)

    return Rectangle(
        lerp(start.x, end.x),
        lerp(start.y, end.y),
        lerp(start.width, end.width),
        lerp(start.height, end.height),
    )


@dataclass
class Animation:
    """Moves a rectangle from ``source`` to ``target`` over ``duration``."""

    source: Rectangle
    target: Rectangle
    duration: timedelta
    animation_type: AnimationType
    elapsed: timedelta = field(default=timedelta(0))
    state: AnimationState = field(default=AnimationState.NOT_STARTED)

    def start(self) -> Rectangle:
        """Reset and run the animation; returns the starting rectangle."""
        self.elapsed = timedelta(0)
        self.state = AnimationState.RUNNING
        return self.source

    def tick(self) -> None:
        """Advance by one millisecond."""
        self.elapsed += _TICK
        if self.elapsed >= self.duration:
            self.state = AnimationState.COMPLETED

    def current_value(self) -> Rectangle:
        """The rectangle at the current point of the animation."""
        if self.duration <= timedelta(0):
            progress = 1.0
        else:
            progress = min(max(self.elapsed / self.duration, 0.0), 1.0)
        return interpolate(
            self.source, self.target, self.animation_type.get_progress(progress)
        )