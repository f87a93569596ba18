"""
maze/
-----
Grid model.  Public API:

    from maze import Grid, Cell, Coord
    from maze import Direction, DIRECTIONS
"""

from maze.cell import Cell, Coord, Direction, DIRECTIONS
from maze.grid import Grid, ORIGIN

__all__ = [
    "Cell",
    "Coord",
    "Direction",
    "DIRECTIONS",
    "Grid",
    "ORIGIN",
]
