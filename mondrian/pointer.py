"""Pointer handling: clamping, scroll frames, button routing and hit-test order."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

BUTTON_LEFT = 272
BUTTON_RIGHT = 273

# Scroll distance of one wheel detent when only the high-resolution value is known.
_V120_STEP = 15.0 / 120.0


class AxisSource(Enum):
    """What produced a scroll event."""

    WHEEL = auto()
    FINGER = auto()
    CONTINUOUS = auto()
    WHEEL_TILT = auto()


@dataclass(frozen=True)
class AxisFrame:
    """One scroll frame as sent to a client."""

    time: int
    source: AxisSource
    horizontal: float | None = None
    vertical: float | None = None
    horizontal_v120: int | None = None
    vertical_v120: int | None = None
    stop_horizontal: bool = False
    stop_vertical: bool = False


class ButtonAction(Enum):
    """What a pointer button event over a surface leads to."""

    FORWARD = auto()
    MOVE = auto()
    RESIZE = auto()
    CONSUME = auto()


class WlrLayer(Enum):
    """Layer-shell layers, from bottom to top."""

    BACKGROUND = auto()
    BOTTOM = auto()
    TOP = auto()
    OVERLAY = auto()


def clamp_coords(
    position: tuple[float, float], size: tuple[float, float]
) -> tuple[float, float]:
    """Keep ``position`` inside an output of ``size`` placed at the origin."""
    x, y = position
    width, height = size
    return (min(max(x, 0.0), float(width)), min(max(y, 0.0), float(height)))


def _amount(value: float | None, v120: float | None) -> float:
    if value is not None:
        return value
    return (v120 if v120 is not None else 0.0) * _V120_STEP


def axis_frame(
    time: int,
    source: AxisSource,
    horizontal: float | None = None,
    vertical: float | None = None,
    horizontal_v120: float | None = None,
    vertical_v120: float | None = None,
) -> AxisFrame:
    """Build the scroll frame for an axis event.

    ``horizontal`` and ``vertical`` are the continuous amounts the device reported,
    or None when it reported only high-resolution wheel steps.
    """
    h_amount = _amount(horizontal, horizontal_v120)
    v_amount = _amount(vertical, vertical_v120)

    h_value = h_v120 = None
    if h_amount != 0.0:
        h_value = h_amount
        if horizontal_v120 is not None:
            h_v120 = int(horizontal_v120)

    v_value = v_v120 = None
    if v_amount != 0.0:
        v_value = v_amount
        if vertical_v120 is not None:
            v_v120 = int(vertical_v120)

    finger = source is AxisSource.FINGER
    return AxisFrame(
        time=time,
        source=source,
        horizontal=h_value,
        vertical=v_value,
        horizontal_v120=h_v120,
        vertical_v120=v_v120,
        stop_horizontal=finger and horizontal == 0.0,
        stop_vertical=finger and vertical == 0.0,
    )


def button_action(
    button: int, pressed: bool, mainmod: bool, grabbed: bool
) -> tuple[ButtonAction, bool]:
    """Decide what a button event over a surface does.

    Returns the action and whether the surface under the pointer takes keyboard focus.
    """
    need_focus = pressed and not grabbed
    if mainmod and pressed:
        if button == BUTTON_LEFT:
            return ButtonAction.MOVE, need_focus
        if button == BUTTON_RIGHT:
            return ButtonAction.RESIZE, need_focus
        return ButtonAction.CONSUME, need_focus
    return ButtonAction.FORWARD, need_focus


def layer_search_order(window_hit: bool) -> tuple[WlrLayer | None, ...]:
    """The order in which surfaces are searched under the pointer.

    ``None`` stands for the tiled windows. When a window is hit the search stops
    there, so the lower layers are only searched when ``window_hit`` is false.
    """
    upper = (WlrLayer.OVERLAY, WlrLayer.TOP, None)
    if window_hit:
        return upper
    return upper + (WlrLayer.BOTTOM, WlrLayer.BACKGROUND)