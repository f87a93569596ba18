"""
path.py — Path Reconstruction
==============================
Every solver records, for each cell it reaches, the cell it came from
and the direction it moved.  Walking those parent pointers backwards
from the exit and reversing gives the origin→exit path.
"""

from typing import Dict, Optional, Tuple

from maze import Coord, Direction, ORIGIN


ParentMap = Dict[Coord, Tuple[Optional[Coord], Optional[Direction]]]


def reconstruct_path(
    parents: ParentMap,
    goal: Coord,
    origin: Coord = ORIGIN,
) -> Tuple[Coord, ...]:
    """
    Origin-to-goal path through `parents`.

    The origin is the root: it is never looked up, only prepended at the
    end.  If the goal was never reached the result is the degenerate
    single-cell path (origin,) — solvers only call this after their own
    "found" check.
    """
    if goal not in parents:
        return (origin,)

    path = []
    cur: Optional[Coord] = goal
    while cur is not None and cur != origin:
        path.append(cur)
        cur = parents[cur][0]
    path.append(origin)
    path.reverse()
    return tuple(path)
