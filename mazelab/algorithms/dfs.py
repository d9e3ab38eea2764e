from __future__ import annotations

from typing import Optional, Sequence

from mazelab.algorithms.common import neighbors
from mazelab.logging import get_logger, log_search_progress
from mazelab.model.grid import Grid
from mazelab.model.point import Point
from mazelab.structures.stack import Stack
from mazelab.types.base import DEFAULT_DIRECTIONS, Cell, Direction

logger = get_logger(__name__)


def depth_first_search(
    grid: Grid,
    directions: Sequence[Direction] = DEFAULT_DIRECTIONS,
    progress_interval: int = 0,
) -> Optional[Stack[Point]]:
    """
    Depth-first search with backtracking from ``grid.start`` to the exit.

    The frontier stack always holds the current path. Each step looks at the
    top cell and pushes its first walkable neighbor in ``directions`` order,
    marking it visited; when none qualifies the top is popped. Marks cells
    ``'V'`` while exploring and ``'.'`` along the final path.

    Returns:
        A stack with the start on top and the exit at the bottom, or None if
        the frontier empties before the exit is reached.
    """
    frontier: Stack[Point] = Stack()
    frontier.push(grid.start)
    grid.set(grid.start, Cell.VISITED)
    steps = 0

    while not grid.is_exit(frontier.top()):
        current = frontier.top()
        for candidate in neighbors(current, directions):
            if grid.is_open_or_exit(candidate):
                frontier.push(candidate)
                grid.set(candidate, Cell.VISITED)
                break
        else:
            frontier.pop()

        steps += 1
        log_search_progress(logger, "DFS", steps, len(frontier), progress_interval)

        if frontier.is_empty():
            logger.debug("DFS exhausted the frontier after %d steps", steps)
            return None

    # Drain exit-first; re-pushing leaves the start on top
    path: Stack[Point] = Stack()
    while not frontier.is_empty():
        point = frontier.pop()
        grid.set(point, Cell.PATH)
        path.push(point)

    logger.debug("DFS reached the exit after %d steps", steps)
    return path
