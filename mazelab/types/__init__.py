"""Shared types for mazelab."""

from mazelab.types.base import (
    CELL_CHARS,
    DEFAULT_DIRECTIONS,
    WALKABLE,
    Cell,
    Direction,
)

__all__ = ["Cell", "CELL_CHARS", "WALKABLE", "Direction", "DEFAULT_DIRECTIONS"]
