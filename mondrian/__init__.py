"""Tiling layout core: split trees, neighbour graphs, animations, key bindings and pointer rules."""

__version__ = "0.1.0"