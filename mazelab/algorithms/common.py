"""Helpers shared by the grid search algorithms."""

from __future__ import annotations

from typing import Iterator, Sequence

from mazelab.model.point import Point
from mazelab.types.base import DEFAULT_DIRECTIONS, Direction


def neighbors(
    point: Point, directions: Sequence[Direction] = DEFAULT_DIRECTIONS
) -> Iterator[Point]:
    """Yield the 4-connected neighbors of ``point`` in ``directions`` order.

    The order is significant: DFS takes the first walkable neighbor and BFS
    enqueues in this order, which decides the path returned on ties.
    """
    for direction in directions:
        yield point.neighbor(direction)
