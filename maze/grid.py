"""
grid.py — Immutable n × n Maze Grid
====================================
Single source of truth for walls.  The generator builds one, the
solvers read one, the renderer draws one.

Responsibilities:
  1. Allocation                 (blank grid, every wall standing)
  2. Geometry                   (bounds, neighbour coordinates, goal)
  3. Carving                    (symmetric wall removal)
  4. Adjacency queries          (open directions, unvisited neighbours)
  5. Serialisation              (to_dict / to_ascii)

Design decisions:
  - The grid is a VALUE.  remove_wall() / mark_visited() return a new
    Grid; only the one or two rows that changed are rebuilt, every
    other row tuple is shared with the previous grid.  A Step can
    therefore keep a reference to the grid it saw without copying it,
    and later carving can never rewrite history.
  - Cells are addressed (x, y) and stored row-major: cells[y][x].
  - Callers pre-validate coordinates.  Nothing here returns error
    codes; a bad coordinate raises IndexError from the tuple lookup.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

from maze.cell import Cell, Coord, Direction, DIRECTIONS


ORIGIN: Coord = (0, 0)

Row = Tuple[Cell, ...]


@dataclass(frozen=True)
class Grid:
    """
    Attributes:
        size  : Side length n.
        cells : n rows of n Cells, cells[y][x].
    """

    size:  int
    cells: Tuple[Row, ...]

    # ==================================================================
    # CONSTRUCTION
    # ==================================================================
    @classmethod
    def blank(cls, size: int) -> "Grid":
        """n × n grid with all walls present and nothing visited."""
        wall = Cell()
        row = tuple(wall for _ in range(size))
        return cls(size=size, cells=tuple(row for _ in range(size)))

    # ==================================================================
    # GEOMETRY
    # ==================================================================
    @property
    def goal(self) -> Coord:
        return (self.size - 1, self.size - 1)

    @property
    def area(self) -> int:
        return self.size * self.size

    def in_bounds(self, coord: Coord) -> bool:
        x, y = coord
        return 0 <= x < self.size and 0 <= y < self.size

    def neighbour(self, coord: Coord, direction: Direction) -> Coord:
        return direction.step(coord)

    def cell(self, coord: Coord) -> Cell:
        x, y = coord
        return self.cells[y][x]

    def coords(self) -> Iterator[Coord]:
        """Every coordinate in row-major order."""
        for y in range(self.size):
            for x in range(self.size):
                yield (x, y)

    # ==================================================================
    # CARVING  (each returns a new Grid)
    # ==================================================================
    def remove_wall(self, coord: Coord, direction: Direction) -> "Grid":
        """Knock down the wall between `coord` and its neighbour in `direction`.

        Both sides are updated: the neighbour loses its opposite wall.
        """
        other = direction.step(coord)
        updates = {
            coord: self.cell(coord).without_wall(direction),
            other: self.cell(other).without_wall(direction.opposite),
        }
        return self._replace_cells(updates)

    def mark_visited(self, coord: Coord) -> "Grid":
        cell = self.cell(coord)
        if cell.visited:
            return self
        return self._replace_cells({coord: cell.mark_visited()})

    def _replace_cells(self, updates: Dict[Coord, Cell]) -> "Grid":
        rows = list(self.cells)
        by_row: Dict[int, List[Cell]] = {}
        for (x, y), cell in updates.items():
            row = by_row.setdefault(y, list(rows[y]))
            row[x] = cell
        for y, row in by_row.items():
            rows[y] = tuple(row)
        return Grid(size=self.size, cells=tuple(rows))

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def is_open(self, coord: Coord, direction: Direction) -> bool:
        """True if no wall blocks passage from `coord` towards `direction`."""
        return not self.cell(coord).has_wall(direction)

    def open_directions(self, coord: Coord) -> List[Direction]:
        return [d for d in DIRECTIONS if self.is_open(coord, d)]

    def open_neighbours(self, coord: Coord) -> List[Tuple[Direction, Coord]]:
        """(direction, neighbour) for every open, in-bounds passage, N/E/S/W order."""
        result = []
        for d in self.open_directions(coord):
            nbr = d.step(coord)
            if self.in_bounds(nbr):
                result.append((d, nbr))
        return result

    def unvisited_neighbours(self, coord: Coord) -> List[Tuple[Direction, Coord]]:
        """In-bounds neighbours not yet reached by the generator (walls ignored)."""
        result = []
        for d in DIRECTIONS:
            nbr = d.step(coord)
            if self.in_bounds(nbr) and not self.cell(nbr).visited:
                result.append((d, nbr))
        return result

    def has_passage(self, a: Coord, b: Coord) -> bool:
        """True if a and b are adjacent and the wall between them is gone."""
        for d in DIRECTIONS:
            if d.step(a) == b:
                return self.is_open(a, d) and self.is_open(b, d.opposite)
        return False

    # ==================================================================
    # WHOLE-GRID QUERIES
    # ==================================================================
    def passages(self) -> List[Tuple[Coord, Coord]]:
        """Every removed wall-pair exactly once (looking E and S only)."""
        result = []
        for coord in self.coords():
            for d in (Direction.E, Direction.S):
                nbr = d.step(coord)
                if self.in_bounds(nbr) and self.is_open(coord, d):
                    result.append((coord, nbr))
        return result

    def passage_count(self) -> int:
        return len(self.passages())

    def visited_count(self) -> int:
        return sum(1 for row in self.cells for c in row if c.visited)

    def all_visited(self) -> bool:
        return self.visited_count() == self.area

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "size":  self.size,
            "cells": [[c.to_dict() for c in row] for row in self.cells],
        }

    def to_ascii(self) -> str:
        """
        Plain-text picture, handy in a terminal or a failing test:

            +--+--+
            |     |
            +--+  +
            |     |
            +--+--+
        """
        lines = ["+" + "--+" * self.size]
        for row in self.cells:
            body = "|"
            floor = "+"
            for cell in row:
                body += "  " + ("|" if cell.e else " ")
                floor += ("--" if cell.s else "  ") + "+"
            lines.append(body)
            lines.append(floor)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Grid(size={self.size}, passages={self.passage_count()})"
