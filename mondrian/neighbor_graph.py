"""Adjacency between tiled windows, by direction."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator

from .direction import Direction


class NeighborGraph:
    """For each window, the windows that touch it on each side."""

    def __init__(self) -> None:
        self._edges: dict[Hashable, dict[Direction, list[Hashable]]] = {}

    def get(self, window: Hashable, direction: Direction) -> list[Hashable] | None:
        """The neighbours of ``window`` in ``direction``, or None if there are none."""
        neighbours = self._edges.get(window, {}).get(direction)
        return None if neighbours is None else list(neighbours)

    def edges(self) -> Iterator[tuple[Hashable, Direction, Hashable]]:
        """Every (window, direction, neighbour) link in the graph."""
        for source, by_direction in self._edges.items():
            for direction, targets in by_direction.items():
                for target in targets:
                    yield source, direction, target

    def add_window(
        self, source: Hashable, direction: Direction, targets: Iterable[Hashable]
    ) -> None:
        """Add ``targets`` as neighbours of ``source`` in ``direction``."""
        self._edges.setdefault(source, {}).setdefault(direction, []).extend(targets)

    def remove_window(
        self, source: Hashable, direction: Direction, target: Hashable
    ) -> None:
        """Drop ``target`` from the neighbours of ``source`` in ``direction``."""
        by_direction = self._edges.get(source)
        if by_direction is None:
            return
        neighbours = by_direction.get(direction)
        if neighbours is not None:
            neighbours[:] = [win for win in neighbours if win != target]
            if not neighbours:
                del by_direction[direction]
        if not by_direction:
            del self._edges[source]

    def remove_direction(
        self, target: Hashable, direction: Direction
    ) -> list[Hashable] | None:
        """Remove and return all neighbours of ``target`` in ``direction``."""
        by_direction = self._edges.get(target)
        if by_direction is None:
            return None
        return by_direction.pop(direction, None)

    def tiled_add(self, source: Hashable, direction: Direction, new: Hashable) -> None:
        """Link ``new``, which was split off ``source`` towards ``direction``."""
        opposite = direction.opposite()

        for side in direction.orthogonal():
            side_neighbours = self.get(source, side)
            if side_neighbours is not None:
                for neighbour in side_neighbours:
                    self.add_window(neighbour, side.opposite(), [new])
                self.add_window(new, side, side_neighbours)

        ahead = self.remove_direction(source, direction)
        if ahead is not None:
            for neighbour in ahead:
                self.remove_window(neighbour, opposite, source)
                self.add_window(neighbour, opposite, [new])
            self.add_window(new, direction, ahead)

        self.add_window(source, direction, [new])
        self.add_window(new, opposite, [source])

    def exchange(self, a: Hashable, b: Hashable) -> None:
        """Swap the positions of ``a`` and ``b`` in the graph."""
        a_neighbours = self._edges.pop(a, {})
        b_neighbours = self._edges.pop(b, {})
        self._edges[a] = b_neighbours
        self._edges[b] = a_neighbours

        swap = {a: b, b: a}
        for by_direction in self._edges.values():
            for neighbours in by_direction.values():
                neighbours[:] = [swap.get(win, win) for win in neighbours]