"""Centralized logging configuration for mazelab.

All package loggers hang off the ``mazelab`` logger. Records go to stderr so
that search reports printed on stdout can be piped or redirected on their
own. The starting level is read from ``MAZELAB_LOG_LEVEL`` (a level name such
as ``DEBUG`` or ``WARNING``) and falls back to INFO.
"""

import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "MAZELAB_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Flag to track if we've already set up the root logger
_ROOT_LOGGER_CONFIGURED = False


def default_log_level() -> int:
    """Return the level named by ``MAZELAB_LOG_LEVEL``, or INFO.

    Unknown names fall back to INFO rather than failing at import time.
    """
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return logging.INFO
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Set up the root mazelab logger with a single handler.

    Calling it again is a no-op until ``reset_logging()`` runs.

    Args:
        level: Logging level (default: ``default_log_level()``).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to StreamHandler on stderr).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger("mazelab")
    root_logger.setLevel(default_log_level() if level is None else level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees the records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits the package configuration.

    Args:
        name: Logger name (typically ``__name__`` of the calling module).

    Returns:
        Logger instance whose level defers to the ``mazelab`` root logger.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def log_search_progress(
    logger: logging.Logger,
    strategy: str,
    count: int,
    frontier_size: int,
    interval: int,
) -> None:
    """Emit a DEBUG progress line every ``interval`` search iterations.

    An ``interval`` of 0 turns progress reporting off.
    """
    if interval and count % interval == 0:
        logger.debug(
            "%s progress: step %d, frontier size %d",
            strategy,
            count,
            frontier_size,
        )


def set_global_log_level(level: int) -> None:
    """Set the log level for all mazelab loggers.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
    """
    setup_root_logger()

    root_logger = logging.getLogger("mazelab")
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Disable debug logging, set to INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Reset logging configuration (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger("mazelab")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
