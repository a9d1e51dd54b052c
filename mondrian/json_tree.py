"""JSON description of a tiled layout."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from .direction import Direction

log = logging.getLogger(__name__)

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


@dataclass(frozen=True)
class JsonLeaf:
    app_id: str


@dataclass(frozen=True)
class JsonSplit:
    direction: Direction
    offset: tuple[int, int]
    left: JsonNode
    right: JsonNode


JsonNode = Union[JsonLeaf, JsonSplit]


def _field(data: dict[str, Any], name: str) -> Any:
    try:
        return data[name]
    except KeyError:
        raise ValueError(f"missing field `{name}`") from None


def _int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer, got {value!r}")
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"integer {value} out of range")
    return value


def _node_from_dict(data: Any) -> JsonNode:
    if not isinstance(data, dict):
        raise ValueError(f"expected an object, got {data!r}")
    kind = _field(data, "type")
    if kind == "Leaf":
        app_id = _field(data, "app_id")
        if not isinstance(app_id, str):
            raise ValueError(f"app_id must be a string, got {app_id!r}")
        return JsonLeaf(app_id)
    if kind == "Split":
        direction = _field(data, "direction")
        if not isinstance(direction, str):
            raise ValueError(f"direction must be a string, got {direction!r}")
        offset = _field(data, "offset")
        if not isinstance(offset, (list, tuple)) or len(offset) != 2:
            raise ValueError(f"offset must be a pair, got {offset!r}")
        return JsonSplit(
            direction=Direction(direction),
            offset=(_int(offset[0]), _int(offset[1])),
            left=_node_from_dict(_field(data, "left")),
            right=_node_from_dict(_field(data, "right")),
        )
    raise ValueError(f"unknown node type {kind!r}")


def _node_to_dict(node: JsonNode) -> dict[str, Any]:
    if isinstance(node, JsonLeaf):
        return {"type": "Leaf", "app_id": node.app_id}
    return {
        "type": "Split",
        "direction": node.direction.value,
        "offset": list(node.offset),
        "left": _node_to_dict(node.left),
        "right": _node_to_dict(node.right),
    }


def _format(node: JsonNode, depth: int) -> list[str]:
    indent = "  " * depth
    if isinstance(node, JsonLeaf):
        return [f"{indent}- Leaf: {json.dumps(node.app_id, ensure_ascii=False)}"]
    return [
        f"{indent}- Split:",
        *_format(node.left, depth + 1),
        *_format(node.right, depth + 1),
    ]


@dataclass(frozen=True)
class JsonTree:
    tiled_tree: JsonNode

    @classmethod
    def from_dict(cls, data: Any) -> JsonTree:
        """Build a tree from decoded JSON; raises ValueError if it is malformed."""
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {data!r}")
        return cls(_node_from_dict(_field(data, "tiled_tree")))

    def to_dict(self) -> dict[str, Any]:
        return {"tiled_tree": _node_to_dict(self.tiled_tree)}

    @classmethod
    def from_json(cls, path: str | os.PathLike[str]) -> JsonTree | None:
        """Load a tree from a file, or None (with a warning) if that fails."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as err:
            log.warning("Failed to read file: %s with err: %s", path, err)
            return None
        try:
            return cls.from_dict(json.loads(text))
        except ValueError as err:
            log.warning("Failed to deserialize JSON from %s: %s", path, err)
            return None

    def to_json(self, path: str | os.PathLike[str]) -> None:
        """Write the tree to a file; a failure is logged, not raised."""
        try:
            Path(path).write_text(json.dumps(self.to_dict()), encoding="utf-8")
        except OSError as err:
            log.warning("Failed to write file: %s with err: %s", path, err)
        else:
            log.info("Successfully wrote JSON to %s", path)

    def format_tree(self) -> str:
        """An indented outline of the tree, one node per line."""
        return "\n".join(_format(self.tiled_tree, 1))

    def print_tree(self) -> None:
        for line in _format(self.tiled_tree, 1):
            log.info("%s", line)