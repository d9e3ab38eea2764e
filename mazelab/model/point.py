"""Grid coordinate used by the search algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from mazelab.types.base import Direction


@dataclass(unsafe_hash=True)
class Point:
    """A ``(row, column)`` cell address.

    Equality and hashing use the coordinates only. ``parent`` is transient
    breadth-first bookkeeping: it points at the cell a point was discovered
    from and means nothing outside the search that set it.
    """

    row: int
    column: int
    parent: Optional[Point] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"[{self.row}, {self.column}]"

    def neighbor(self, direction: Direction) -> Point:
        """Return the adjacent point one step in ``direction``."""
        d_row, d_col = direction.delta
        return Point(self.row + d_row, self.column + d_col)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.column)
