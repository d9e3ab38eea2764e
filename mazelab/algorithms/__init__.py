"""Grid search algorithms."""

from mazelab.algorithms.bfs import breadth_first_search
from mazelab.algorithms.common import neighbors
from mazelab.algorithms.dfs import depth_first_search

__all__ = ["breadth_first_search", "depth_first_search", "neighbors"]
