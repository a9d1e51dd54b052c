"""Choosing the output backend."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum

log = logging.getLogger(__name__)

_DISPLAY_VARS = ("WAYLAND_DISPLAY", "WAYLAND_SOCKET", "DISPLAY")


class BackendKind(Enum):
    """Run on a bare terminal, or nested in a window of another display server."""

    TTY = "tty"
    WINIT = "winit"


def select_backend(environ: Mapping[str, str] | None = None) -> BackendKind:
    """Nested when a display server is already running, otherwise on the terminal."""
    env = os.environ if environ is None else environ
    if any(name in env for name in _DISPLAY_VARS):
        log.info("Using winit backend")
        return BackendKind.WINIT
    log.info("Using tty backend")
    return BackendKind.TTY


def seat_name(kind: BackendKind, tty_seat: str | None = None) -> str:
    """The seat name for ``kind``; the terminal backend uses its session's seat."""
    if kind is BackendKind.WINIT:
        return "winit"
    if tty_seat is None:
        raise ValueError("Failed to get seat name")
    return tty_seat