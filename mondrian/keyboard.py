"""Keyboard handling: key combinations, bindings and the actions they run."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum

from .direction import Direction

log = logging.getLogger(__name__)

MAINMOD_KEY = "Control_L"
DEFAULT_PRIORITY = 3


class Function(Enum):
    """Compositor functions a key combination can trigger."""

    SWITCH_WORKSPACE_1 = "SwitchWorkspace1"
    SWITCH_WORKSPACE_2 = "SwitchWorkspace2"
    INVERT_WINDOW = "InvertWindow"
    EXPANSION = "Expansion"
    RECOVER = "Recover"
    QUIT = "Quit"
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"
    KILL = "Kill"
    JSON = "Json"

    @property
    def direction(self) -> Direction | None:
        """The direction a window exchange goes, for the four moving functions."""
        return _DIRECTIONS.get(self)

    @property
    def workspace(self) -> int | None:
        """The workspace number a switch goes to."""
        return _WORKSPACES.get(self)


_DIRECTIONS = {
    Function.UP: Direction.UP,
    Function.DOWN: Direction.DOWN,
    Function.LEFT: Direction.LEFT,
    Function.RIGHT: Direction.RIGHT,
}

_WORKSPACES = {
    Function.SWITCH_WORKSPACE_1: 1,
    Function.SWITCH_WORKSPACE_2: 2,
}


@dataclass(frozen=True)
class KeyAction:
    """What a key binding does: run an external command or an internal function."""

    function: Function | None = None
    command: str | None = None
    args: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if (self.function is None) == (self.command is None):
            raise ValueError("a key action needs exactly one of function or command")

    @classmethod
    def run_command(cls, command: str, args: Iterable[str] = ()) -> KeyAction:
        return cls(command=command, args=tuple(args))

    @classmethod
    def internal(cls, function: Function) -> KeyAction:
        return cls(function=function)


class KeyState(Enum):
    PRESSED = "pressed"
    RELEASED = "released"


def sort_keys(names: Iterable[str], priority: Mapping[str, int]) -> list[str]:
    """Order key names by priority; unknown keys rank 3, ties keep their order."""
    return sorted(names, key=lambda name: priority.get(name, DEFAULT_PRIORITY))


def combo_name(names: Iterable[str], priority: Mapping[str, int]) -> str:
    """The binding name of a set of pressed keys, such as ``Control_L+Return``."""
    return "+".join(sort_keys(names, priority))


@dataclass
class KeyboardState:
    """The keys held down and whether the main modifier is among them."""

    priority: Mapping[str, int] = field(default_factory=dict)
    pressed: list[str] = field(default_factory=list)
    mainmod: bool = False

    def press(self, name: str) -> str:
        """Record a key press; returns the combination now held."""
        if name not in self.pressed:
            self.pressed.append(name)
        if MAINMOD_KEY in self.pressed:
            self.mainmod = True
        return combo_name(self.pressed, self.priority)

    def release(self, name: str) -> None:
        """Record a key release."""
        if name in self.pressed:
            self.pressed.remove(name)
        if name == MAINMOD_KEY:
            self.mainmod = False


class ActionRunner:
    """Runs the action bound to a key combination."""

    def __init__(
        self,
        keybindings: Mapping[str, KeyAction],
        dispatch: Callable[[Function], None] | None = None,
        spawn: Callable[[Sequence[str]], object] = subprocess.Popen,
    ) -> None:
        self.keybindings = keybindings
        self._dispatch = dispatch
        self._spawn = spawn

    def run(self, keys: str) -> KeyAction | None:
        """Run the binding for ``keys``; returns the action, or None if unbound."""
        action = self.keybindings.get(keys)
        if action is None:
            return None

        if action.command is not None:
            argv = [action.command, *action.args]
            try:
                self._spawn(argv)
            except (OSError, ValueError) as err:
                log.error("Failed to execute command '%s': %s", " ".join(argv), err)
            return action

        function = action.function
        if function is Function.KILL:
            log.info("Kill the full compositor")
            raise SystemExit(0)
        if function is Function.JSON:
            return action
        if self._dispatch is not None:
            self._dispatch(function)
        return action