"""Base enums and constants shared by the grid model and search algorithms."""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Tuple


class Cell:
    """Legal grid characters."""

    OPEN = " "
    WALL = "W"
    EXIT = "E"
    VISITED = "V"
    PATH = "."


#: Every character a grid cell may hold.
CELL_CHARS: FrozenSet[str] = frozenset(
    {Cell.OPEN, Cell.WALL, Cell.EXIT, Cell.VISITED, Cell.PATH}
)

#: Characters a search may step onto.
WALKABLE: FrozenSet[str] = frozenset({Cell.OPEN, Cell.EXIT})


class Direction(Enum):
    """Grid movement directions with ``(row, column)`` deltas."""

    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    NORTH = "north"

    @property
    def delta(self) -> Tuple[int, int]:
        """Return the ``(row, column)`` offset for one step in this direction."""
        return _DELTAS[self]

    @classmethod
    def from_string(cls, value: str) -> "Direction":
        """Parse a direction name case-insensitively.

        Raises:
            ValueError: If the string doesn't match any direction.
        """
        try:
            return cls[value.strip().upper()]
        except KeyError:
            valid = ", ".join(d.name.lower() for d in cls)
            raise ValueError(
                f"Invalid direction '{value}'. Valid values are: {valid}"
            ) from None


_DELTAS = {
    Direction.SOUTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
    Direction.NORTH: (-1, 0),
}

#: Neighbor evaluation order used by both search strategies.
DEFAULT_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.SOUTH,
    Direction.EAST,
    Direction.WEST,
    Direction.NORTH,
)
