"""Compositor configuration: startup commands, environment and workspace settings."""

from __future__ import annotations

import logging
import os
import re
import subprocess
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path

log = logging.getLogger(__name__)

_RE_EXEC = re.compile(r"^\s*exec-once\s*=\s*(.+)$")
_RE_ENV = re.compile(r"^\s*env\s*=\s*([^,\s]+)\s*,\s*(.+)$")


class TiledScheme(Enum):
    DEFAULT = auto()
    SPIRAL = auto()


@dataclass(frozen=True)
class WorkspaceConfigs:
    gap: int = 12
    scheme: TiledScheme = TiledScheme.DEFAULT


def parse_config(text: str) -> tuple[list[tuple[str, list[str]]], dict[str, str]]:
    """Parse config text into startup commands and environment variables."""
    commands: list[tuple[str, list[str]]] = []
    env_vars: dict[str, str] = {}

    for raw in text.split("\n"):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        if match := _RE_EXEC.match(line):
            parts = match.group(1).strip().split()
            cmd = parts[0] if parts else ""
            commands.append((cmd, parts[1:]))
        elif match := _RE_ENV.match(line):
            env_vars[match.group(1).strip()] = match.group(2).strip()

    return commands, env_vars


@dataclass
class Configs:
    exec_once_cmds: list[tuple[str, list[str]]] = field(default_factory=list)
    env_vars: dict[str, str] = field(default_factory=dict)
    workspaces: WorkspaceConfigs = field(default_factory=WorkspaceConfigs)

    @classmethod
    def from_text(cls, text: str) -> Configs:
        commands, env_vars = parse_config(text)
        return cls(exec_once_cmds=commands, env_vars=env_vars)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Configs:
        return cls.from_text(Path(path).read_text(encoding="utf-8"))

    def init(self) -> None:
        """Start the startup commands and export the environment variables."""
        for cmd, args in self.exec_once_cmds:
            try:
                child = subprocess.Popen([cmd, *args])
            except (OSError, ValueError) as err:
                log.error("Failed to run '%s': %s", cmd, err)
            else:
                log.debug("Spawned: %s (PID: %s)", cmd, child.pid)

        for key, val in self.env_vars.items():
            log.info("set %s = %s", key, val)
            os.environ[key] = val