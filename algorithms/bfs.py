"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS over a finished maze.  Yields a Step at every
meaningful event:
  1. Seed the queue with the entry          →  START
  2. Dequeue a cell                         →  EXPLORE
  3. Enqueue an unseen open neighbour       →  ADD
  4. Exit dequeued                          →  FOUND (path + length)
  5. Queue empty before the exit            →  EXHAUSTED

The maze is unweighted and cells leave the queue in the order they
entered it, so the first time the exit is dequeued its path is the
shortest by edge count.

Pseudocode lines are 0-indexed and match the PSEUDOCODE constant
exported alongside the generator so the UI can highlight them live.
"""

from typing import Generator, List
from collections import deque

from maze import Grid, ORIGIN
from algorithms.path import ParentMap, reconstruct_path
from algorithms.step import Step, StepBuilder, StepKind


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(maze):",                              # 0
    "    queue ← [(0,0)]",                         # 1
    "    visited ← {(0,0)}",                       # 2
    "    parent ← {(0,0): none}",                  # 3
    "    while queue is not empty:",               # 4
    "        cell ← queue.dequeue()",              # 5
    "        if cell == exit: return path",        # 6
    "        for nbr through an open wall:",       # 7
    "            if nbr not visited:",             # 8
    "                visited.add(nbr)",            # 9
    "                parent[nbr] = cell",          # 10
    "                queue.enqueue(nbr)",          # 11
    "    return NOT FOUND",                        # 12
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(grid: Grid) -> Generator[Step, None, None]:
    """
    Yields Step snapshots for every event during BFS from (0,0) to
    (n-1, n-1).  The grid is only read.
    """

    goal    = grid.goal
    queue   = deque([ORIGIN])
    visited = {ORIGIN}
    parents: ParentMap = {ORIGIN: (None, None)}

    sb = StepBuilder(grid)
    sb.frontier = queue
    sb.visited  = visited
    yield sb.build(StepKind.START, ORIGIN, "BFS from (0,0)", pseudocode_line=1)

    while queue:
        x, y = cell = queue.popleft()
        yield sb.build(StepKind.EXPLORE, cell, f"Exploring ({x},{y})", pseudocode_line=5)

        if cell == goal:
            path = reconstruct_path(parents, goal)
            sb.frontier = ()
            sb.path     = path
            yield sb.build(
                StepKind.FOUND, cell,
                f"Found exit! Path length: {len(path) - 1}",
                pseudocode_line=6,
            )
            return

        for direction, nbr in grid.open_neighbours(cell):
            if nbr in visited:
                continue
            visited.add(nbr)
            parents[nbr] = (cell, direction)
            queue.append(nbr)
            yield sb.build(
                StepKind.ADD, cell,
                f"Queue ({nbr[0]},{nbr[1]})",
                pseudocode_line=11,
            )

    # --- exhausted without finding the exit ---
    sb.frontier = ()
    yield sb.build(
        StepKind.EXHAUSTED, ORIGIN,
        f"Queue is empty. Exit ({goal[0]},{goal[1]}) is NOT reachable from (0,0).",
        pseudocode_line=12,
    )
