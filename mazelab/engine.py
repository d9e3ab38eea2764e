"""Pathfinding engine that runs a search over a grid and reports the result.

Example:
    >>> from mazelab import Grid, PathfindingEngine, Point
    >>> grid = Grid(["    E"], Point(0, 0))
    >>> engine = PathfindingEngine(grid)
    >>> print(engine.breadth_first_search().splitlines()[0])
    Path to follow from Start [0, 0] to Exit [0, 4] - 4 steps:
"""

from __future__ import annotations

from time import perf_counter
from typing import Callable, List, Optional, Sequence

from mazelab.algorithms.bfs import breadth_first_search
from mazelab.algorithms.dfs import depth_first_search
from mazelab.config import SEARCH_CONFIG, SearchConfig
from mazelab.exceptions import NotSearchedError
from mazelab.logging import get_logger
from mazelab.model.grid import Grid
from mazelab.model.point import Point
from mazelab.structures.stack import Stack
from mazelab.types.base import Direction

logger = get_logger(__name__)

NO_EXIT_MESSAGE = "No exit found in maze!"

SearchFunc = Callable[[Grid, Sequence[Direction], int], Optional[Stack[Point]]]


class PathfindingEngine:
    """Solve a grid maze with depth-first or breadth-first search.

    Searches mutate the grid markers in place. The path from the most recent
    successful search is retained and can be read with
    ``get_path_to_follow()``; a failed search leaves it in place.
    """

    def __init__(self, grid: Grid, config: Optional[SearchConfig] = None) -> None:
        self.grid = grid
        self.config = config or SEARCH_CONFIG
        self._path: Optional[Stack[Point]] = None

    def depth_first_search(self) -> str:
        """Run depth-first search and return the formatted report."""
        return self._run("DFS", depth_first_search)

    def breadth_first_search(self) -> str:
        """Run breadth-first search and return the formatted report."""
        return self._run("BFS", breadth_first_search)

    def get_path_to_follow(self) -> Stack[Point]:
        """Return a copy of the stored path with the start on top.

        Raises:
            NotSearchedError: If no search has succeeded yet.
        """
        if self._path is None:
            raise NotSearchedError("Maze has not been searched")
        return self._path.copy()

    @property
    def path(self) -> List[Point]:
        """Stored path as a list from start to exit."""
        return list(self.get_path_to_follow())

    @property
    def has_path(self) -> bool:
        return self._path is not None

    def _run(self, name: str, search: SearchFunc) -> str:
        logger.debug("Starting %s from %s", name, self.grid.start)
        t0 = perf_counter()
        path = search(
            self.grid, self.config.directions, self.config.progress_interval
        )
        elapsed = perf_counter() - t0

        if path is None:
            logger.info("%s found no exit (%.3f ms)", name, elapsed * 1000.0)
            return f"{NO_EXIT_MESSAGE}\n\n{self.grid.render()}"

        logger.info(
            "%s found a %d-step path (%.3f ms)",
            name,
            len(path) - 1,
            elapsed * 1000.0,
        )
        self._path = path
        return self._format_success(list(path))

    def _format_success(self, points: List[Point]) -> str:
        start, exit_point = points[0], points[-1]
        lines = [
            f"Path to follow from Start {start} to Exit {exit_point} "
            f"- {len(points) - 1} steps:"
        ]
        lines.extend(str(p) for p in points)
        lines.append(self.grid.render())
        return "\n".join(lines)
