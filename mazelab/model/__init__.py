"""Maze model: coordinates and the character grid."""

from mazelab.model.grid import Grid
from mazelab.model.point import Point

__all__ = ["Grid", "Point"]
