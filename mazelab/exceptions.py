"""Exception hierarchy for mazelab.

Each error also derives from the closest built-in exception so callers can
catch ``IndexError``/``ValueError``/``LookupError`` without importing mazelab.
"""


class MazelabError(Exception):
    """Base class for all mazelab errors."""


class EmptyCollectionError(MazelabError, IndexError):
    """Raised when reading or removing from an empty sequence, stack or queue."""


class InvalidArgumentError(MazelabError, ValueError):
    """Raised for a non-positive position or a missing (``None``) value."""


class OutOfRangeError(MazelabError, IndexError):
    """Raised when a position or coordinate lies beyond the container bounds."""


class NotFoundError(MazelabError, LookupError):
    """Raised when a value-based lookup finds no matching element."""


class InvalidConfigurationError(MazelabError, ValueError):
    """Raised when a maze cannot be built from the given cells and start."""


class NotSearchedError(MazelabError, RuntimeError):
    """Raised when a path is requested before any successful search."""
