"""
generate.py — Randomized Depth-First Maze Carving
==================================================
Generator-based "recursive backtracker" with an explicit stack.
Yields a Step at:
  1. Entry cell (0,0) marked visited          →  VISIT
  2. Carve into a random unvisited neighbour  →  MOVE
  3. Dead end, pop the stack                  →  BACKTRACK
  4. Every cell visited                       →  COMPLETE

Every MOVE connects exactly one previously unreached cell, so the
result is a spanning tree: n² − 1 passages, connected, no cycles.

Randomness comes from an injected random.Random so a (size, seed)
pair always carves the same maze.
"""

import random
from dataclasses import dataclass
from typing import Generator, List, Optional, Tuple

from maze import Coord, Grid, ORIGIN
from algorithms.step import Step, StepBuilder, StepKind


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Carve(n):",                                  # 0
    "    cur ← (0,0); visited ← {cur}",               # 1
    "    stack ← []",                                 # 2
    "    while |visited| < n²:",                      # 3
    "        nbrs ← unvisited neighbours of cur",     # 4
    "        if nbrs is not empty:",                  # 5
    "            nxt ← random choice of nbrs",        # 6
    "            stack.push(cur)",                    # 7
    "            remove wall between cur and nxt",    # 8
    "            cur ← nxt; visited.add(cur)",        # 9
    "        else:",                                  # 10
    "            cur ← stack.pop()",                  # 11
    "    return maze",                                # 12
]


@dataclass(frozen=True)
class MazeRun:
    """The finished maze and the step sequence that built it."""

    grid:  Grid
    steps: Tuple[Step, ...]
    seed:  Optional[int] = None


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def generate_maze(
    size: int,
    rng: Optional[random.Random] = None,
) -> Generator[Step, None, None]:
    """
    Yields Step snapshots for every event while carving an size × size maze.

    Args:
        size : Side length n (>= 1; validated by the caller).
        rng  : Random source for neighbour choice.  A fresh unseeded
               random.Random is used when omitted.
    """

    rng   = rng or random.Random()
    grid  = Grid.blank(size).mark_visited(ORIGIN)
    stack: List[Coord] = []
    cur   = ORIGIN

    sb = StepBuilder(grid)
    yield sb.build(StepKind.VISIT, cur, "Start at Entry (0,0)", pseudocode_line=1)

    visited = 1
    total   = size * size

    while visited < total:
        nbrs = grid.unvisited_neighbours(cur)

        if nbrs:
            direction, nxt = rng.choice(nbrs)
            stack.append(cur)
            grid = grid.remove_wall(cur, direction).mark_visited(nxt)
            cur = nxt
            visited += 1

            sb.grid  = grid
            sb.stack = stack
            yield sb.build(
                StepKind.MOVE, cur,
                f"Move {direction.value} to ({cur[0]},{cur[1]}), wall removed",
                pseudocode_line=9,
            )
        elif stack:
            cur = stack.pop()
            sb.stack = stack
            yield sb.build(
                StepKind.BACKTRACK, cur,
                f"Backtrack to ({cur[0]},{cur[1]})",
                pseudocode_line=11,
            )

    sb.stack = ()
    yield sb.build(StepKind.COMPLETE, cur, "Maze generation complete!", pseudocode_line=12)


def build_maze(size: int, seed: Optional[int] = None) -> MazeRun:
    """Carve eagerly and return the final grid with its full step sequence."""
    steps = tuple(generate_maze(size, random.Random(seed)))
    return MazeRun(grid=steps[-1].grid, steps=steps, seed=seed)
