"""Configuration classes for mazelab components."""

from dataclasses import dataclass
from typing import Sequence, Tuple

from mazelab.types.base import DEFAULT_DIRECTIONS, Direction


@dataclass
class SearchConfig:
    """Configuration for grid exploration."""

    # Neighbor evaluation order; the first walkable direction wins in DFS
    directions: Tuple[Direction, ...] = DEFAULT_DIRECTIONS

    # Emit a DEBUG progress line every N explored cells (0 disables)
    progress_interval: int = 1000

    def __post_init__(self) -> None:
        self.directions = tuple(self.directions)
        if len(set(self.directions)) != len(self.directions):
            raise ValueError("Search directions must not repeat")
        if not self.directions:
            raise ValueError("At least one search direction is required")
        if self.progress_interval < 0:
            raise ValueError("progress_interval must be non-negative")

    @classmethod
    def from_names(cls, names: Sequence[str], **kwargs) -> "SearchConfig":
        """Build a config from direction names such as ``["south", "east"]``."""
        return cls(directions=tuple(Direction.from_string(n) for n in names), **kwargs)


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
