"""Fixed-shape character grid with a start cell.

The grid stores its cells in a 2-D NumPy array of single characters. Shape
is fixed at construction. Searches mark cells ``'V'`` (visited) and ``'.'``
(path) through ``set``; writes to the exit cell are ignored so it always
reads ``'E'``.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Union

import numpy as np

from mazelab.exceptions import (
    InvalidArgumentError,
    InvalidConfigurationError,
    OutOfRangeError,
)
from mazelab.logging import get_logger
from mazelab.model.point import Point
from mazelab.types.base import CELL_CHARS, WALKABLE, Cell

logger = get_logger(__name__)

RowLike = Union[str, Sequence[str]]


class Grid:
    """Rectangular maze of characters plus a starting point.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
        start: Starting point.
        exit: Location of the ``'E'`` cell, or None if the maze has no exit.
    """

    def __init__(self, cells: Iterable[RowLike], start: Point) -> None:
        """Build a grid from rows of characters.

        Args:
            cells: Rows given as strings or sequences of single characters.
            start: Starting point.

        Raises:
            InvalidConfigurationError: If the rows are empty or ragged, hold an
                unknown character or more than one exit, or if ``start`` lies
                outside the grid, on a wall or on the exit.
        """
        matrix = [list(row) for row in cells]
        if not matrix or not matrix[0]:
            raise InvalidConfigurationError("Maze must have at least one row and column")
        width = len(matrix[0])
        for idx, row in enumerate(matrix):
            if len(row) != width:
                raise InvalidConfigurationError(
                    f"Row {idx} has {len(row)} columns, expected {width}"
                )
            for col, char in enumerate(row):
                if char not in CELL_CHARS:
                    raise InvalidConfigurationError(
                        f"Invalid character {char!r} at [{idx}, {col}]"
                    )

        self._cells = np.array(matrix, dtype="<U1")
        self.rows, self.columns = self._cells.shape
        self.start = Point(start.row, start.column)

        exits = np.argwhere(self._cells == Cell.EXIT)
        if len(exits) > 1:
            raise InvalidConfigurationError(
                f"Maze has {len(exits)} exits, expected at most one"
            )
        self.exit: Optional[Point] = (
            Point(int(exits[0][0]), int(exits[0][1])) if len(exits) else None
        )

        if not self.in_bounds(self.start):
            raise InvalidConfigurationError(
                f"Starting point {self.start} is outside the "
                f"{self.rows}x{self.columns} maze."
            )
        if self.at(self.start) == Cell.EXIT:
            raise InvalidConfigurationError("Starting point is the exit.")
        if self.at(self.start) == Cell.WALL:
            raise InvalidConfigurationError("Starting point is in a wall.")

        logger.debug(
            "Built %dx%d grid, start %s, exit %s",
            self.rows,
            self.columns,
            self.start,
            self.exit,
        )

    @property
    def cells(self) -> np.ndarray:
        """Return a read-only view of the character matrix."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.row < self.rows and 0 <= point.column < self.columns

    def at(self, point: Point) -> str:
        """Return the character at ``point``.

        Raises:
            OutOfRangeError: If ``point`` lies outside the grid.
        """
        self._check_bounds(point)
        return str(self._cells[point.row, point.column])

    def set(self, point: Point, char: str) -> None:
        """Write ``char`` at ``point``; writes to the exit cell are ignored.

        Raises:
            OutOfRangeError: If ``point`` lies outside the grid.
            InvalidArgumentError: If ``char`` is not a legal cell character.
        """
        self._check_bounds(point)
        if char not in CELL_CHARS:
            raise InvalidArgumentError(f"Invalid cell character {char!r}")
        if self._cells[point.row, point.column] == Cell.EXIT:
            return
        self._cells[point.row, point.column] = char

    def is_exit(self, point: Point) -> bool:
        return self.in_bounds(point) and self.at(point) == Cell.EXIT

    def is_open_or_exit(self, point: Point) -> bool:
        """Return True if ``point`` is inside the grid and open or the exit."""
        return self.in_bounds(point) and self.at(point) in WALKABLE

    def clear_marks(self) -> None:
        """Turn visited and path markers back into open cells."""
        marked = (self._cells == Cell.VISITED) | (self._cells == Cell.PATH)
        self._cells[marked] = Cell.OPEN

    def render(self) -> str:
        """Return the grid as text, one line per row."""
        return "\n".join("".join(row) for row in self._cells)

    def copy(self) -> Grid:
        return Grid(self._cells.tolist(), self.start)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, columns={self.columns}, start={self.start})"

    def _check_bounds(self, point: Point) -> None:
        if not self.in_bounds(point):
            raise OutOfRangeError(
                f"Point {point} is outside the {self.rows}x{self.columns} maze"
            )
