from __future__ import annotations

from typing import List

import pytest

from mazelab.algorithms.bfs import breadth_first_search
from mazelab.algorithms.common import neighbors
from mazelab.algorithms.dfs import depth_first_search
from mazelab.lib.nx import shortest_path_length
from mazelab.model.grid import Grid
from mazelab.model.point import Point
from mazelab.types.base import Cell, Direction

SEARCHES = [depth_first_search, breadth_first_search]


def _coords(path) -> List[tuple]:
    return [p.as_tuple() for p in path]


def _assert_valid_path(grid: Grid, original: Grid, points: List[Point]) -> None:
    assert points[0] == grid.start
    assert points[-1] == grid.exit
    for a, b in zip(points, points[1:]):
        assert abs(a.row - b.row) + abs(a.column - b.column) == 1
    for p in points:
        assert original.at(p) in (Cell.OPEN, Cell.EXIT)
        expected = Cell.EXIT if p == grid.exit else Cell.PATH
        assert grid.at(p) == expected


def test_neighbors_follow_given_order():
    got = list(neighbors(Point(1, 1)))
    assert _coords(got) == [(2, 1), (1, 2), (1, 0), (0, 1)]
    got = list(neighbors(Point(1, 1), (Direction.NORTH, Direction.WEST)))
    assert _coords(got) == [(0, 1), (1, 0)]


def test_dfs_corridor(corridor):
    path = depth_first_search(corridor)
    assert _coords(path) == [(0, 0), (0, 1), (0, 2), (0, 3)]
    assert corridor.render() == "...E\nWWWW"


def test_dfs_prefers_south_then_east(ring):
    path = depth_first_search(ring)
    assert _coords(path) == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (1, 2)]
    assert ring.render() == ".  \n.WE\n..."


def test_dfs_backtracks_out_of_dead_end(dead_end):
    path = depth_first_search(dead_end)
    assert _coords(path) == [(0, 0), (0, 1), (0, 2), (0, 3), (1, 3), (2, 3)]
    assert dead_end.render() == "....\nVWW.\nVWWE"


def test_dfs_custom_direction_order(open_square):
    path = depth_first_search(open_square, (Direction.EAST, Direction.SOUTH))
    assert _coords(path) == [(0, 0), (0, 1), (1, 1)]


def test_bfs_returns_shorter_route(ring):
    path = breadth_first_search(ring)
    assert _coords(path) == [(0, 0), (0, 1), (0, 2), (1, 2)]
    assert ring.render() == "...\nVWE\nVV "


def test_bfs_path_points_carry_no_parent(ring):
    path = breadth_first_search(ring)
    assert all(p.parent is None for p in path)


@pytest.mark.parametrize("search", SEARCHES)
def test_enclosed_exit_marks_reachable_cells(search, enclosed_exit):
    assert search(enclosed_exit) is None
    assert enclosed_exit.render() == "VVW  \nVVWWW\nVVWEW"


@pytest.mark.parametrize("search", SEARCHES)
def test_no_exit_at_all(search):
    grid = Grid(["  ", " W"], Point(0, 0))
    assert search(grid) is None
    assert grid.render() == "VV\nVW"


@pytest.mark.parametrize("search", SEARCHES)
def test_start_next_to_exit(search):
    grid = Grid([" E"], Point(0, 0))
    assert _coords(search(grid)) == [(0, 0), (0, 1)]
    assert grid.render() == ".E"


@pytest.mark.parametrize("search", SEARCHES)
def test_labyrinth_path_is_valid(search, labyrinth):
    original = labyrinth.copy()
    points = list(search(labyrinth))
    _assert_valid_path(labyrinth, original, points)


def test_bfs_matches_networkx_shortest_length(labyrinth):
    expected = shortest_path_length(labyrinth)
    path = breadth_first_search(labyrinth)
    assert len(path) - 1 == expected


def test_dfs_never_shorter_than_bfs(labyrinth):
    other = labyrinth.copy()
    assert len(depth_first_search(labyrinth)) >= len(breadth_first_search(other))


@pytest.mark.parametrize("search", SEARCHES)
def test_searching_a_marked_grid_again_needs_clear(search, corridor):
    assert search(corridor) is not None
    assert search(corridor) is None
    corridor.clear_marks()
    assert search(corridor) is not None
