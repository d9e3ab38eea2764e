"""Library integrations."""

from mazelab.lib.nx import shortest_path_length, to_networkx

__all__ = ["to_networkx", "shortest_path_length"]
