"""Shared maze fixtures.

Cell legend: ``' '`` open, ``'W'`` wall, ``'E'`` exit.
"""

from __future__ import annotations

import pytest

from mazelab.model.grid import Grid
from mazelab.model.point import Point


@pytest.fixture
def corridor() -> Grid:
    #  S..E
    #  WWWW
    return Grid(["   E", "WWWW"], Point(0, 0))


@pytest.fixture
def ring() -> Grid:
    # Two routes around a single wall: 3 moves east then south,
    # 5 moves south, east and back north.
    #  S..
    #  .WE
    #  ...
    return Grid(["   ", " WE", "   "], Point(0, 0))


@pytest.fixture
def dead_end() -> Grid:
    # Going south first runs into a dead end at [2, 0].
    return Grid(["    ", " WW ", " WWE"], Point(0, 0))


@pytest.fixture
def enclosed_exit() -> Grid:
    # Exit walled in; [0, 3] and [0, 4] are open but unreachable.
    return Grid(["  W  ", "  WWW", "  WEW"], Point(0, 0))


@pytest.fixture
def open_square() -> Grid:
    return Grid(["  ", " E"], Point(0, 0))


@pytest.fixture
def labyrinth() -> Grid:
    return Grid(
        [
            "  W     W",
            " WW WWW W",
            "    W   W",
            "WWW W W  ",
            "    W WW ",
            " WWWW  W ",
            "      W E",
        ],
        Point(0, 0),
    )
