"""
cell.py — Maze Cell & Compass Directions
=========================================
A Cell is four wall flags plus a `visited` flag that only the
generator cares about.

Design decisions:
  - Cell is a frozen dataclass.  "Removing a wall" returns a NEW Cell,
    so a Grid holding Cells can be shared freely between snapshots.
  - Direction carries its own (dx, dy) and opposite, so callers never
    need a lookup table.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple


Coord = Tuple[int, int]     # (x, y) — x is the column, y the row


# ---------------------------------------------------------------------------
# Direction — iteration order (N, E, S, W) is the exploration order
# ---------------------------------------------------------------------------
class Direction(Enum):
    N = "N"
    E = "E"
    S = "S"
    W = "W"

    @property
    def dx(self) -> int:
        return _MOVES[self][0]

    @property
    def dy(self) -> int:
        return _MOVES[self][1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]

    def step(self, coord: Coord) -> Coord:
        """Coordinate one move away in this direction (may be out of bounds)."""
        x, y = coord
        return (x + self.dx, y + self.dy)


_MOVES = {
    Direction.N: (0, -1),
    Direction.E: (1, 0),
    Direction.S: (0, 1),
    Direction.W: (-1, 0),
}

_OPPOSITE = {
    Direction.N: Direction.S,
    Direction.E: Direction.W,
    Direction.S: Direction.N,
    Direction.W: Direction.E,
}

DIRECTIONS: Tuple[Direction, ...] = (Direction.N, Direction.E, Direction.S, Direction.W)


# ---------------------------------------------------------------------------
# Cell
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Cell:
    """
    Attributes:
        n, e, s, w : True while the wall on that side is still standing.
        visited    : Set by the carving generator once the cell is reached.
    """

    n:       bool = True
    e:       bool = True
    s:       bool = True
    w:       bool = True
    visited: bool = False

    def has_wall(self, direction: Direction) -> bool:
        return getattr(self, direction.value.lower())

    def without_wall(self, direction: Direction) -> "Cell":
        return replace(self, **{direction.value.lower(): False})

    def mark_visited(self) -> "Cell":
        return self if self.visited else replace(self, visited=True)

    @property
    def wall_count(self) -> int:
        return sum((self.n, self.e, self.s, self.w))

    def to_dict(self) -> dict:
        return {"N": self.n, "E": self.e, "S": self.s, "W": self.w, "visited": self.visited}
