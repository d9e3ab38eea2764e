from __future__ import annotations

from typing import Optional, Sequence

from mazelab.algorithms.common import neighbors
from mazelab.logging import get_logger, log_search_progress
from mazelab.model.grid import Grid
from mazelab.model.point import Point
from mazelab.structures.queue import Queue
from mazelab.structures.stack import Stack
from mazelab.types.base import DEFAULT_DIRECTIONS, Cell, Direction

logger = get_logger(__name__)


def breadth_first_search(
    grid: Grid,
    directions: Sequence[Direction] = DEFAULT_DIRECTIONS,
    progress_interval: int = 0,
) -> Optional[Stack[Point]]:
    """
    Breadth-first search from ``grid.start`` to the exit.

    Cells are marked ``'V'`` when dequeued. Every enqueued point carries a
    ``parent`` link to the point it was discovered from; once the exit is
    dequeued the path is rebuilt by following those links and marked ``'.'``.
    The returned path is shortest by number of moves.

    Returns:
        A stack with the start on top and the exit at the bottom, or None if
        the exit is unreachable.
    """
    start = Point(grid.start.row, grid.start.column)
    frontier: Queue[Point] = Queue()
    frontier.enqueue(start)
    expanded = 0

    while not frontier.is_empty():
        current = frontier.dequeue()
        if grid.is_exit(current):
            path = _reconstruct(grid, current)
            logger.debug(
                "BFS reached the exit after expanding %d cells, path has %d points",
                expanded,
                len(path),
            )
            return path

        # A cell can be queued more than once before it is expanded
        if grid.at(current) == Cell.VISITED and current != start:
            continue
        grid.set(current, Cell.VISITED)
        expanded += 1
        log_search_progress(logger, "BFS", expanded, len(frontier), progress_interval)

        for candidate in neighbors(current, directions):
            if grid.is_open_or_exit(candidate):
                candidate.parent = current
                frontier.enqueue(candidate)

    logger.debug("BFS exhausted the frontier after expanding %d cells", expanded)
    return None


def _reconstruct(grid: Grid, exit_point: Point) -> Stack[Point]:
    """Follow parent links from the exit back to the start.

    The stored points are fresh copies without parent links.
    """
    path: Stack[Point] = Stack()
    point: Optional[Point] = exit_point
    while point is not None:
        grid.set(point, Cell.PATH)
        path.push(Point(point.row, point.column))
        point = point.parent
    return path
