"""mazelab: linked containers and grid maze pathfinding.

mazelab provides a doubly linked ``Sequence`` with positional and value-based
access, ``Stack`` and ``Queue`` adapters over singly linked nodes, and a
``PathfindingEngine`` that solves character-grid mazes with depth-first or
breadth-first search.

Primary API:
    Sequence - Doubly linked list with 1-indexed positions and sorted insertion
    Stack, Queue - Linked LIFO/FIFO containers
    Grid, Point - Maze model
    PathfindingEngine - DFS/BFS solver with formatted reports
    load_maze() - Load a maze from a text or YAML file

Example:
    from mazelab import Grid, PathfindingEngine, Point

    grid = Grid(["  W", "W E"], Point(0, 0))
    engine = PathfindingEngine(grid)
    print(engine.breadth_first_search())
    path = engine.get_path_to_follow()
"""

from __future__ import annotations

from mazelab import cli, logging
from mazelab.config import SEARCH_CONFIG, SearchConfig
from mazelab.engine import PathfindingEngine
from mazelab.exceptions import (
    EmptyCollectionError,
    InvalidArgumentError,
    InvalidConfigurationError,
    MazelabError,
    NotFoundError,
    NotSearchedError,
    OutOfRangeError,
)
from mazelab.io import load_maze, load_maze_yaml, parse_maze_text
from mazelab.model.grid import Grid
from mazelab.model.point import Point
from mazelab.structures.queue import Queue
from mazelab.structures.sequence import Sequence
from mazelab.structures.stack import Stack
from mazelab.types.base import Cell, Direction

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Containers
    "Sequence",
    "Stack",
    "Queue",
    # Model
    "Grid",
    "Point",
    "Cell",
    "Direction",
    # Search
    "PathfindingEngine",
    "SearchConfig",
    "SEARCH_CONFIG",
    # Loading
    "load_maze",
    "load_maze_yaml",
    "parse_maze_text",
    # Errors
    "MazelabError",
    "EmptyCollectionError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "NotFoundError",
    "InvalidConfigurationError",
    "NotSearchedError",
    # Utilities
    "cli",
    "logging",
]
