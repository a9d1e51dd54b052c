"""Cardinal directions used by the tiling layout."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """A side of a window: where a neighbour sits or where a split goes."""

    LEFT = "Left"
    UP = "Up"
    RIGHT = "Right"
    DOWN = "Down"

    @staticmethod
    def default() -> Direction:
        """The direction used when nothing else is asked for."""
        return Direction.RIGHT

    def opposite(self) -> Direction:
        """The direction pointing the other way."""
        return _OPPOSITE[self]

    def rotate_cw(self) -> Direction:
        """The direction a quarter turn clockwise from this one."""
        return _CLOCKWISE[self]

    @staticmethod
    def horizontals() -> tuple[Direction, Direction]:
        """Left and right."""
        return (Direction.LEFT, Direction.RIGHT)

    @staticmethod
    def verticals() -> tuple[Direction, Direction]:
        """Up and down."""
        return (Direction.UP, Direction.DOWN)

    def orthogonal(self) -> tuple[Direction, Direction]:
        """The two directions at right angles to this one."""
        if self in (Direction.LEFT, Direction.RIGHT):
            return Direction.verticals()
        return Direction.horizontals()


_OPPOSITE = {
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.UP: Direction.DOWN,
}

_CLOCKWISE = {
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
    Direction.UP: Direction.RIGHT,
}

ALL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
    Direction.UP,
)