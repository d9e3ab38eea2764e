"""NetworkX conversion for grids.

Example:
    >>> from mazelab import Grid, Point
    >>> from mazelab.lib.nx import to_networkx
    >>> G = to_networkx(Grid(["  E", "WW "], Point(0, 0)))
    >>> sorted(G.nodes)
    [(0, 0), (0, 1), (0, 2), (1, 2)]
"""

from __future__ import annotations

from typing import Optional

import networkx as nx

from mazelab.model.grid import Grid
from mazelab.model.point import Point
from mazelab.types.base import Cell


def to_networkx(grid: Grid) -> nx.Graph:
    """Build an undirected graph of every non-wall cell.

    Nodes are ``(row, column)`` tuples with a ``char`` attribute holding the
    current cell character. Edges join 4-connected neighbors. Visited and
    path markers count as open, so the graph reflects the maze layout rather
    than search state.
    """
    G = nx.Graph()
    for row in range(grid.rows):
        for col in range(grid.columns):
            char = grid.at(Point(row, col))
            if char != Cell.WALL:
                G.add_node((row, col), char=char)

    for row, col in list(G.nodes):
        for neighbor in ((row + 1, col), (row, col + 1)):
            if neighbor in G:
                G.add_edge((row, col), neighbor)
    return G


def shortest_path_length(grid: Grid) -> Optional[int]:
    """Return the number of moves from start to exit, or None if unreachable."""
    if grid.exit is None:
        return None
    G = to_networkx(grid)
    try:
        return nx.shortest_path_length(
            G, grid.start.as_tuple(), grid.exit.as_tuple()
        )
    except nx.NetworkXNoPath:
        return None
