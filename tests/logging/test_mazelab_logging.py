"""Tests for the package logging setup."""

import logging
import sys
from io import StringIO

import pytest

from mazelab.config import SearchConfig
from mazelab.engine import PathfindingEngine
from mazelab.logging import (
    LOG_LEVEL_ENV,
    default_log_level,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    log_search_progress,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)
from mazelab.model.grid import Grid
from mazelab.model.point import Point


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    reset_logging()
    yield
    reset_logging()


def _capture_root(fmt: str = "%(levelname)s %(name)s %(message)s") -> StringIO:
    capture = StringIO()
    setup_root_logger(
        level=logging.INFO, format_string=fmt, handler=logging.StreamHandler(capture)
    )
    return capture


def test_default_level_is_info(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    reset_logging()
    logger = get_logger("mazelab.test")
    assert logger.level == logging.NOTSET
    assert logger.getEffectiveLevel() == logging.INFO


@pytest.mark.parametrize(
    "value, expected",
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("", logging.INFO),
        ("chatty", logging.INFO),
    ],
)
def test_level_from_environment(monkeypatch, value, expected):
    monkeypatch.setenv(LOG_LEVEL_ENV, value)
    assert default_log_level() == expected
    reset_logging()
    assert get_logger("mazelab.test.env").getEffectiveLevel() == expected


def test_default_handler_writes_to_stderr():
    reset_logging()
    setup_root_logger()
    (handler,) = logging.getLogger("mazelab").handlers
    assert handler.stream is sys.stderr


def test_enable_and_disable_debug():
    capture = _capture_root()
    logger = get_logger("mazelab.test.debug")

    logger.debug("hidden")
    enable_debug_logging()
    logger.debug("shown")
    disable_debug_logging()
    logger.debug("hidden-again")

    out = capture.getvalue()
    assert "shown" in out
    assert "hidden" not in out.replace("shown", "")


def test_setup_is_idempotent():
    _capture_root()
    setup_root_logger(level=logging.DEBUG)
    root = logging.getLogger("mazelab")
    assert len(root.handlers) == 1
    assert root.level == logging.INFO

    set_global_log_level(logging.ERROR)
    assert root.level == logging.ERROR
    assert all(h.level == logging.ERROR for h in root.handlers)


def test_search_messages_reach_package_handler():
    capture = _capture_root()
    grid = Grid(["  E"], Point(0, 0))
    PathfindingEngine(grid).breadth_first_search()
    assert "INFO mazelab.engine BFS found a 2-step path" in capture.getvalue()


def test_debug_records_from_algorithms(caplog):
    set_global_log_level(logging.WARNING)
    caplog.set_level(logging.DEBUG, logger="mazelab.algorithms.dfs")
    PathfindingEngine(Grid([" E"], Point(0, 0))).depth_first_search()
    assert any(
        r.levelno == logging.DEBUG and r.name == "mazelab.algorithms.dfs"
        for r in caplog.records
    )


def test_search_progress_every_interval(caplog):
    logger = get_logger("mazelab.test.progress")
    caplog.set_level(logging.DEBUG, logger="mazelab.test.progress")
    for step in range(1, 7):
        log_search_progress(logger, "BFS", step, 10 - step, 3)
    log_search_progress(logger, "DFS", 4, 1, 0)

    messages = [r.getMessage() for r in caplog.records]
    assert messages == [
        "BFS progress: step 3, frontier size 7",
        "BFS progress: step 6, frontier size 4",
    ]


def test_progress_interval_reaches_search_loop(caplog):
    caplog.set_level(logging.DEBUG, logger="mazelab.algorithms.bfs")
    grid = Grid(["     ", "    E"], Point(0, 0))
    PathfindingEngine(grid, SearchConfig(progress_interval=2)).breadth_first_search()
    assert any("BFS progress: step 2" in r.getMessage() for r in caplog.records)
