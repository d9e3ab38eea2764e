import logging

import pytest

from mazelab.config import SearchConfig
from mazelab.engine import NO_EXIT_MESSAGE, PathfindingEngine
from mazelab.exceptions import InvalidConfigurationError, NotSearchedError
from mazelab.model.grid import Grid
from mazelab.model.point import Point
from mazelab.types.base import Cell, Direction


def test_dfs_report_for_corridor(corridor):
    engine = PathfindingEngine(corridor)
    report = engine.depth_first_search()
    assert report == (
        "Path to follow from Start [0, 0] to Exit [0, 3] - 3 steps:\n"
        "[0, 0]\n"
        "[0, 1]\n"
        "[0, 2]\n"
        "[0, 3]\n"
        "...E\n"
        "WWWW"
    )


def test_bfs_report_for_ring(ring):
    engine = PathfindingEngine(ring)
    report = engine.breadth_first_search()
    lines = report.splitlines()
    assert lines[0] == "Path to follow from Start [0, 0] to Exit [1, 2] - 3 steps:"
    assert lines[1:5] == ["[0, 0]", "[0, 1]", "[0, 2]", "[1, 2]"]
    assert lines[5:] == ["...", "VWE", "VV "]


@pytest.mark.parametrize("method", ["depth_first_search", "breadth_first_search"])
def test_no_exit_report(method, enclosed_exit):
    engine = PathfindingEngine(enclosed_exit)
    report = getattr(engine, method)()
    assert report == f"{NO_EXIT_MESSAGE}\n\nVVW  \nVVWWW\nVVWEW"
    with pytest.raises(NotSearchedError):
        engine.get_path_to_follow()


def test_path_before_search_fails(corridor):
    engine = PathfindingEngine(corridor)
    assert not engine.has_path
    with pytest.raises(NotSearchedError, match="not been searched"):
        engine.get_path_to_follow()
    with pytest.raises(NotSearchedError):
        engine.path


def test_get_path_returns_copy(ring):
    engine = PathfindingEngine(ring)
    engine.depth_first_search()
    first = engine.get_path_to_follow()
    assert first.top() == Point(0, 0)
    drained = [first.pop() for _ in range(len(first))]
    assert drained[-1] == Point(1, 2)
    assert engine.path == drained
    assert len(engine.get_path_to_follow()) == 6


def test_failed_search_keeps_previous_path(corridor):
    engine = PathfindingEngine(corridor)
    engine.breadth_first_search()
    expected = engine.path
    report = engine.breadth_first_search()
    assert report.startswith(NO_EXIT_MESSAGE)
    assert engine.has_path
    assert engine.path == expected
    assert engine.get_path_to_follow().top() == Point(0, 0)


@pytest.mark.parametrize("method", ["depth_first_search", "breadth_first_search"])
def test_exit_cell_survives_search(method, labyrinth):
    engine = PathfindingEngine(labyrinth)
    getattr(engine, method)()
    assert labyrinth.at(labyrinth.exit) == Cell.EXIT
    assert engine.path[-1] == labyrinth.exit


def test_invalid_start_fails_before_search():
    with pytest.raises(InvalidConfigurationError):
        PathfindingEngine(Grid(["W E"], Point(0, 0)))
    with pytest.raises(InvalidConfigurationError):
        PathfindingEngine(Grid(["  E"], Point(0, 2)))


def test_config_direction_order(open_square):
    config = SearchConfig(directions=(Direction.EAST, Direction.SOUTH))
    engine = PathfindingEngine(open_square, config)
    engine.depth_first_search()
    assert engine.path == [Point(0, 0), Point(0, 1), Point(1, 1)]


def test_config_validation():
    with pytest.raises(ValueError):
        SearchConfig(directions=(Direction.EAST, Direction.EAST))
    with pytest.raises(ValueError):
        SearchConfig(directions=())
    with pytest.raises(ValueError):
        SearchConfig.from_names(["south", "up"])
    cfg = SearchConfig.from_names(["North", "south"])
    assert cfg.directions == (Direction.NORTH, Direction.SOUTH)


def test_search_logs_outcome(caplog, corridor):
    caplog.set_level(logging.DEBUG, logger="mazelab")
    PathfindingEngine(corridor).depth_first_search()
    messages = [r.getMessage() for r in caplog.records]
    assert any("DFS found a 3-step path" in m for m in messages)
    assert any(r.name == "mazelab.algorithms.dfs" for r in caplog.records)
