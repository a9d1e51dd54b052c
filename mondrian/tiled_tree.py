"""Binary tiling tree that lays windows out by splitting rectangles."""

from __future__ import annotations

import logging
import os
from collections.abc import Hashable, Iterator
from dataclasses import dataclass, replace
from datetime import timedelta
from typing import NamedTuple, Union

from .animation import AnimationType, Rectangle
from .direction import ALL_DIRECTIONS, Direction
from .json_tree import JsonTree
from .neighbor_graph import NeighborGraph

log = logging.getLogger(__name__)

ANIMATION_DURATION = timedelta(milliseconds=30)


def _div(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass(frozen=True)
class AnimationRequest:
    """A window that should be animated from one rectangle to another."""

    window: Hashable
    source: Rectangle
    target: Rectangle
    duration: timedelta
    animation_type: AnimationType


class Space:
    """Where windows are mapped, plus the animations queued for them."""

    def __init__(self) -> None:
        self._rects: dict[Hashable, Rectangle] = {}
        self._animations: list[AnimationRequest] = []
        self.activated: Hashable | None = None

    def place(self, window: Hashable, rect: Rectangle, activate: bool) -> None:
        """Map ``window`` at ``rect``, activating it if asked."""
        self._rects[window] = rect
        if activate:
            self.activated = window

    def element_geometry(self, window: Hashable) -> Rectangle | None:
        """The rectangle ``window`` is mapped at, or None if it is not mapped."""
        return self._rects.get(window)

    def take_animations(self) -> list[AnimationRequest]:
        """Return the queued animations and clear the queue."""
        taken, self._animations = self._animations, []
        return taken

    def _animate(
        self,
        window: Hashable,
        source: Rectangle,
        target: Rectangle,
        animation_type: AnimationType = AnimationType.EASE_IN_OUT_QUAD,
    ) -> None:
        self._animations.append(
            AnimationRequest(window, source, target, ANIMATION_DURATION, animation_type)
        )


class NodeId(NamedTuple):
    index: int
    version: int


@dataclass
class _Leaf:
    window: Hashable


@dataclass
class _Split:
    direction: Direction
    rect: Rectangle
    offset: tuple[int, int]
    left: NodeId
    right: NodeId


_Node = Union[_Leaf, _Split]


class _Slots:
    """Versioned slot storage; freed slots are reused last-freed first."""

    def __init__(self) -> None:
        self._entries: list[list] = []
        self._free: list[int] = []

    def insert(self, node: _Node) -> NodeId:
        if self._free:
            index = self._free.pop()
            entry = self._entries[index]
            entry[0] += 1
            entry[1] = node
        else:
            index = len(self._entries)
            entry = [1, node]
            self._entries.append(entry)
        return NodeId(index, entry[0])

    def get(self, node_id: NodeId) -> _Node | None:
        if node_id.index < len(self._entries):
            version, node = self._entries[node_id.index]
            if version == node_id.version:
                return node
        return None

    def __getitem__(self, node_id: NodeId) -> _Node:
        node = self.get(node_id)
        if node is None:
            raise KeyError(f"invalid node id {node_id}")
        return node

    def __setitem__(self, node_id: NodeId, node: _Node) -> None:
        self[node_id]  # validates the id
        self._entries[node_id.index][1] = node

    def remove(self, node_id: NodeId) -> _Node | None:
        node = self.get(node_id)
        if node is None:
            return None
        entry = self._entries[node_id.index]
        entry[0] += 1
        entry[1] = None
        self._free.append(node_id.index)
        return node

    def items(self) -> Iterator[tuple[NodeId, _Node]]:
        for index, (version, node) in enumerate(self._entries):
            if version % 2 == 1:
                yield NodeId(index, version), node

    def values(self) -> Iterator[_Node]:
        return (node for _, node in self.items())


def split_rect(
    rect: Rectangle, direction: Direction, offset: tuple[int, int], gap: int
) -> tuple[Rectangle, Rectangle]:
    """Split ``rect`` into the two child rectangles of a split node."""
    off_x, off_y = offset
    if direction in (Direction.LEFT, Direction.RIGHT):
        half = _div(rect.width, 2) - gap
        left = replace(rect, width=half + off_x)
        right = replace(rect, x=rect.x + half + gap + off_x, width=half - off_x)
    else:
        half = _div(rect.height, 2) - gap
        left = replace(rect, height=half + off_y)
        right = replace(rect, y=rect.y + half + gap + off_y, height=half - off_y)
    return left, right


def new_rects(
    direction: Direction, rect: Rectangle, gap: int
) -> tuple[Rectangle, Rectangle]:
    """Halve ``rect`` for a new window towards ``direction``.

    Returns the rectangle left for the existing window and the one for the new window.
    """
    if direction in (Direction.LEFT, Direction.RIGHT):
        half = _div(rect.width - gap, 2)
        original = replace(rect, width=half)
        new = replace(rect, width=half)
        if direction is Direction.LEFT:
            original = replace(original, x=original.x + half + gap)
        else:
            new = replace(new, x=new.x + half + gap)
    else:
        half = _div(rect.height - gap, 2)
        original = replace(rect, height=half)
        new = replace(rect, height=half)
        if direction is Direction.UP:
            original = replace(original, y=original.y + half + gap)
        else:
            new = replace(new, y=new.y + half + gap)
    return original, new


def _geometry(space: Space, window: Hashable) -> Rectangle:
    rect = space.element_geometry(window)
    if rect is None:
        raise LookupError(f"window {window!r} is not mapped")
    return rect


class TiledTree:
    """Windows as leaves of a binary tree of split rectangles."""

    def __init__(self, window: Hashable, gap: int) -> None:
        self._nodes = _Slots()
        self.root: NodeId | None = self._nodes.insert(_Leaf(window))
        self.spiral_node: NodeId | None = self.root
        self.neighbor_graph = NeighborGraph()
        self.gap = gap

    def expansion(self, space: Space) -> None:
        """Lay every window side by side, each a third of the root's width."""
        bound = self.root_rect(space)
        if bound is None:
            return
        width = _div(bound.width - 2 * self.gap, 3)
        height = bound.height
        x, y = bound.x, bound.y
        for node in self._nodes.values():
            if not isinstance(node, _Leaf):
                continue
            source = _geometry(space, node.window)
            target = Rectangle(x, y, width, height)
            space.place(node.window, target, False)
            space._animate(node.window, source, target)
            x += width + self.gap

    def recover(self, space: Space) -> None:
        """Put every window back where the tree says it belongs."""
        if self.root is None:
            return
        node = self._nodes[self.root]
        if isinstance(node, _Split):
            self.modify(self.root, node.rect, space)

    def root_rect(self, space: Space) -> Rectangle | None:
        """The rectangle covered by the whole tree."""
        if self.root is None:
            return None
        node = self._nodes[self.root]
        if isinstance(node, _Leaf):
            return space.element_geometry(node.window)
        return node.rect

    def get_count(self) -> int:
        """The number of windows in the tree."""
        return sum(1 for node in self._nodes.values() if isinstance(node, _Leaf))

    def is_empty(self) -> bool:
        return self.root is None

    def find_node(self, window: Hashable) -> NodeId | None:
        """The id of the leaf holding ``window``."""
        for node_id, node in self._nodes.items():
            if isinstance(node, _Leaf) and node.window == window:
                return node_id
        return None

    def first_window(self) -> Hashable | None:
        """The leftmost window of the tree."""
        if self.root is None:
            log.warning("Failed to get root_id")
            return None
        node = self._nodes[self.root]
        while isinstance(node, _Split):
            node = self._nodes[node.left]
        return node.window

    def _parent_and_sibling(self, target: NodeId) -> tuple[NodeId, NodeId] | None:
        for node_id, node in self._nodes.items():
            if isinstance(node, _Split):
                if node.left == target:
                    return node_id, node.right
                if node.right == target:
                    return node_id, node.left
        return None

    def insert_window(
        self,
        target: Hashable | None,
        new_window: Hashable,
        direction: Direction,
        space: Space,
    ) -> bool:
        """Split ``target`` (or the first window) and put ``new_window`` towards ``direction``."""
        if target is None:
            target = self.first_window()
            if target is None:
                log.warning("Failed to get first window")
                return False

        target_id = self.find_node(target)
        if target_id is None:
            return False

        rect = space.element_geometry(target)
        if rect is None:
            log.warning("Failed to get window rectangle")
            return False

        original, new = new_rects(direction, rect, self.gap)
        space.place(target, original, False)
        space.place(new_window, new, True)

        old_leaf = self._nodes.insert(_Leaf(target))
        new_leaf = self._nodes.insert(_Leaf(new_window))
        self.spiral_node = new_leaf

        if direction in (Direction.LEFT, Direction.UP):
            left, right = new_leaf, old_leaf
        else:
            left, right = old_leaf, new_leaf
        self._nodes[target_id] = _Split(direction, rect, (0, 0), left, right)

        self.neighbor_graph.tiled_add(target, direction, new_window)

        space._animate(target, rect, original)
        if direction is Direction.RIGHT:
            source = replace(new, x=new.x + new.width)
        elif direction is Direction.LEFT:
            source = replace(new, x=new.x - new.width)
        elif direction is Direction.UP:
            source = replace(new, y=new.y - new.height)
        else:
            source = replace(new, y=new.y + new.height)
        space._animate(new_window, source, new, AnimationType.OVERSHOOT_BOUNCE)
        return True

    def insert_window_spiral(self, new_window: Hashable, space: Space) -> bool:
        """Insert ``new_window`` next to the latest one, turning clockwise each time."""
        if self.spiral_node is None:
            return False
        node = self._nodes[self.spiral_node]
        if not isinstance(node, _Leaf):
            return False
        direction = ALL_DIRECTIONS[(self.get_count() - 1) % 4]
        return self.insert_window(node.window, new_window, direction, space)

    def remove(
        self, target: Hashable, focus: Hashable | None, space: Space
    ) -> tuple[bool, Hashable | None]:
        """Remove ``target``; returns whether it was removed and the new focus."""
        target_id = self.find_node(target)
        if target_id is None:
            log.warning("Failed to get target_id")
            return False, focus

        if target_id == self.root and isinstance(self._nodes[target_id], _Leaf):
            self._nodes.remove(target_id)
            self.root = None
            return True, None

        found = self._parent_and_sibling(target_id)
        if found is None:
            log.warning("Failed to get node: %s parent and sibling", target_id)
            return False, focus
        parent_id, sibling_id = found

        if self.spiral_node == target_id:
            self.spiral_node = parent_id

        parent = self._nodes[parent_id]
        if not isinstance(parent, _Split):
            return False, focus
        rect = parent.rect

        sibling = self._nodes.remove(sibling_id)
        if sibling is None:
            log.warning("Failed to remove sibling: %s", sibling_id)
            return False, focus

        if isinstance(sibling, _Leaf):
            source = _geometry(space, sibling.window)
            space.place(sibling.window, rect, False)
            self._nodes[parent_id] = _Leaf(sibling.window)
            if focus == target:
                focus = sibling.window
            space._animate(sibling.window, source, rect)
        else:
            self._nodes[parent_id] = _Split(
                sibling.direction, rect, (0, 0), sibling.left, sibling.right
            )
            self.modify(parent_id, rect, space)
            if focus == target:
                focus = self.first_window()

        self._nodes.remove(target_id)
        return True, focus

    def modify(self, node_id: NodeId, rect: Rectangle, space: Space) -> None:
        """Fit the subtree at ``node_id`` into ``rect``."""
        node = self._nodes[node_id]
        if isinstance(node, _Leaf):
            source = _geometry(space, node.window)
            space.place(node.window, rect, False)
            space._animate(node.window, source, rect)
            return
        left_rect, right_rect = split_rect(rect, node.direction, node.offset, self.gap)
        node.rect = rect
        self.modify(node.left, left_rect, space)
        self.modify(node.right, right_rect, space)

    def _parent_split(self, target: Hashable) -> tuple[NodeId, _Split] | None:
        target_id = self.find_node(target)
        if target_id is None:
            log.warning("Failed to get target_id")
            return None
        if self.root == target_id:
            return None
        found = self._parent_and_sibling(target_id)
        if found is None:
            log.warning("Failed to get node: %s parent and sibling", target_id)
            return None
        parent_id = found[0]
        parent = self._nodes[parent_id]
        if not isinstance(parent, _Split):
            return None
        return parent_id, parent

    def invert_window(self, target: Hashable, space: Space) -> None:
        """Turn the split holding ``target`` a quarter turn clockwise."""
        found = self._parent_split(target)
        if found is None:
            return
        parent_id, parent = found
        parent.direction = parent.direction.rotate_cw()
        self.modify(parent_id, parent.rect, space)

    def resize(self, target: Hashable, offset: tuple[int, int], space: Space) -> None:
        """Move the dividing line of the split holding ``target`` by ``offset``."""
        found = self._parent_split(target)
        if found is None:
            return
        parent_id, parent = found
        parent.offset = (parent.offset[0] + offset[0], parent.offset[1] + offset[1])
        self.modify(parent_id, parent.rect, space)

    def exchange(self, focus: Hashable, direction: Direction, space: Space) -> None:
        """Swap ``focus`` with its first neighbour towards ``direction``."""
        neighbours = self.neighbor_graph.get(focus, direction)
        if neighbours is None:
            return
        neighbour = neighbours[0]

        neighbour_id = self.find_node(neighbour)
        focus_id = self.find_node(focus)
        if neighbour_id is None or focus_id is None:
            raise LookupError("window is not in the tree")

        neighbour_rect = _geometry(space, neighbour)
        focus_rect = _geometry(space, focus)

        if neighbour_id != focus_id:
            node_a = self._nodes[neighbour_id]
            node_b = self._nodes[focus_id]
            if isinstance(node_a, _Leaf) and isinstance(node_b, _Leaf):
                node_a.window, node_b.window = node_b.window, node_a.window
                space.place(node_a.window, neighbour_rect, False)
                space.place(node_b.window, focus_rect, False)

        self.neighbor_graph.exchange(neighbour, focus)

        space._animate(neighbour, neighbour_rect, focus_rect)
        space._animate(focus, focus_rect, neighbour_rect)

    def from_json(self, path: str | os.PathLike[str]) -> JsonTree | None:
        """Load a layout description from ``path`` and log its outline."""
        json_tree = JsonTree.from_json(path)
        if json_tree is not None:
            json_tree.print_tree()
        return json_tree