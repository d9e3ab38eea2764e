"""Command-line interface for mazelab."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import networkx as nx

from mazelab.config import SearchConfig
from mazelab.engine import PathfindingEngine
from mazelab.io import load_maze
from mazelab.lib.nx import shortest_path_length, to_networkx
from mazelab.logging import default_log_level, get_logger, set_global_log_level
from mazelab.model.grid import Grid

logger = get_logger(__name__)


def _load_or_exit(path: Path) -> Grid:
    """Load a maze file, logging the failure and exiting with status 1."""
    try:
        return load_maze(path)
    except FileNotFoundError:
        logger.error(f"Maze file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to load maze: {type(e).__name__}: {e}")
        sys.exit(1)


def _solve(path: Path, strategy: str, directions: Optional[List[str]]) -> None:
    """Load a maze, run one search and print the report."""
    logger.info(f"Loading maze from: {path}")
    grid = _load_or_exit(path)
    try:
        config = SearchConfig.from_names(directions) if directions else None
    except ValueError as e:
        logger.error(f"Invalid search directions: {e}")
        sys.exit(1)

    engine = PathfindingEngine(grid, config)
    if strategy == "dfs":
        report = engine.depth_first_search()
    else:
        report = engine.breadth_first_search()
    print(report)


def _inspect(path: Path) -> None:
    """Print a short summary of a maze without searching it."""
    logger.info(f"Inspecting maze from: {path}")
    grid = _load_or_exit(path)

    G = to_networkx(grid)
    length = shortest_path_length(grid)
    component = nx.node_connected_component(G, grid.start.as_tuple())

    print(f"Dimensions: {grid.rows} x {grid.columns}")
    print(f"Start: {grid.start}")
    print(f"Exit: {grid.exit if grid.exit is not None else 'none'}")
    print(f"Walkable cells: {G.number_of_nodes()}")
    print(f"Reachable from start: {len(component)}")
    if length is None:
        print("Exit reachable: no")
    else:
        print(f"Exit reachable: yes ({length} steps)")
    print()
    print(grid.render())


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``mazelab`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="mazelab",
        description="Solve and inspect grid mazes.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{solve,inspect}",
        help="Available commands",
    )

    solve_parser = subparsers.add_parser("solve", help="Find a path to the exit")
    solve_parser.add_argument("maze", type=Path, help="Path to maze file")
    solve_parser.add_argument(
        "--strategy",
        "-s",
        choices=("dfs", "bfs"),
        default="bfs",
        help="Search strategy (default: bfs)",
    )
    solve_parser.add_argument(
        "--directions",
        nargs=4,
        metavar="DIR",
        default=None,
        help="Neighbor order, e.g. south east west north",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show maze dimensions and reachability"
    )
    inspect_parser.add_argument("maze", type=Path, help="Path to maze file")

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(default_log_level())

    if args.command == "solve":
        _solve(args.maze, args.strategy, args.directions)
    elif args.command == "inspect":
        _inspect(args.maze)


if __name__ == "__main__":
    main()
