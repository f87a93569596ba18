"""
astar.py — A* Search
=====================
Generator-based A* over a finished maze, guided by the Manhattan
distance to the exit:

    h(x, y) = |x − (n−1)| + |y − (n−1)|

On a 4-connected unit-cost grid Manhattan is admissible and consistent,
so the first time the exit is expanded its path is optimal.  On a
perfect maze that is also the ONLY path, the same one BFS finds; A*
simply tends to expand fewer cells on the way.

Open set:
  A binary heap of (f, order, cell).  `order` is the sequence number of
  the cell's first insertion, so among equal f the cell that joined the
  open set first is expanded first (FIFO tie-break).  When a cell's g
  improves while it is still open a fresh entry is pushed with the same
  order; the superseded entry is recognised by its stale f and dropped.

Yields a Step at:
  1. Initialise g/f, open set = {(0,0)}     →  START
  2. Pop minimum-f cell, close it           →  EXPLORE
  3. Neighbour enters the open set          →  ADD
  4. Exit expanded                          →  FOUND
  5. Open set empty                         →  EXHAUSTED

The snapshots expose g and f for every touched cell, which the
score overlay renders.
"""

import heapq
from typing import Dict, Generator, List, Set, Tuple

from maze import Coord, Grid, ORIGIN
from algorithms.path import ParentMap, reconstruct_path
from algorithms.step import Step, StepBuilder, StepKind


# ---------------------------------------------------------------------------
# Heuristic
# ---------------------------------------------------------------------------
def manhattan(cell: Coord, goal: Coord) -> int:
    return abs(cell[0] - goal[0]) + abs(cell[1] - goal[1])


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def AStar(maze):",                                 # 0
    "    g[(0,0)] ← 0; f[(0,0)] ← h((0,0))",            # 1
    "    open ← [(0,0)]; closed ← []",                  # 2
    "    while open is not empty:",                     # 3
    "        cell ← open.pop_min_f()",                  # 4
    "        closed.add(cell)",                         # 5
    "        if cell == exit: return path",             # 6
    "        for nbr through an open wall:",            # 7
    "            if nbr in closed: continue",           # 8
    "            tentative_g ← g[cell] + 1",            # 9
    "            if tentative_g < g[nbr]:",             # 10
    "                parent[nbr] ← cell",               # 11
    "                g[nbr] ← tentative_g",             # 12
    "                f[nbr] ← g[nbr] + h(nbr)",         # 13
    "                if nbr not in open: open.add(nbr)",  # 14
    "    return NOT FOUND",                             # 15
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def astar(grid: Grid) -> Generator[Step, None, None]:
    goal = grid.goal

    g_score: Dict[Coord, int] = {ORIGIN: 0}
    f_score: Dict[Coord, int] = {ORIGIN: manhattan(ORIGIN, goal)}
    parents: ParentMap        = {ORIGIN: (None, None)}
    order:   Dict[Coord, int] = {ORIGIN: 0}

    heap: List[Tuple[int, int, Coord]] = [(f_score[ORIGIN], 0, ORIGIN)]
    open_set: Set[Coord]  = {ORIGIN}
    closed:   List[Coord] = []
    closed_set: Set[Coord] = set()

    def frontier() -> List[Coord]:
        return sorted(open_set, key=lambda c: (f_score[c], order[c]))

    sb = StepBuilder(grid)
    sb.closed  = closed
    sb.visited = closed_set
    sb.g_score = g_score
    sb.f_score = f_score
    sb.frontier = frontier()
    yield sb.build(StepKind.START, ORIGIN, "A* from (0,0)", pseudocode_line=1)

    while heap:
        f, _, cell = heapq.heappop(heap)
        if cell in closed_set or f != f_score[cell]:
            continue                                   # superseded entry

        open_set.discard(cell)
        closed.append(cell)
        closed_set.add(cell)

        sb.frontier = frontier()
        yield sb.build(
            StepKind.EXPLORE, cell,
            f"A* at ({cell[0]},{cell[1]}) | g={g_score[cell]} f={f}",
            pseudocode_line=5,
        )

        if cell == goal:
            path = reconstruct_path(parents, goal)
            sb.frontier = ()
            sb.path     = path
            yield sb.build(
                StepKind.FOUND, cell,
                f"A* found optimal path! Length: {len(path) - 1}",
                pseudocode_line=6,
            )
            return

        for direction, nbr in grid.open_neighbours(cell):
            if nbr in closed_set:
                continue
            tentative_g = g_score[cell] + 1
            if tentative_g >= g_score.get(nbr, float("inf")):
                continue

            parents[nbr] = (cell, direction)
            g_score[nbr] = tentative_g
            f_score[nbr] = tentative_g + manhattan(nbr, goal)
            order.setdefault(nbr, len(order))
            heapq.heappush(heap, (f_score[nbr], order[nbr], nbr))

            if nbr not in open_set:
                open_set.add(nbr)
                sb.frontier = frontier()
                yield sb.build(
                    StepKind.ADD, cell,
                    f"Add ({nbr[0]},{nbr[1]}) | g={tentative_g} f={f_score[nbr]}",
                    pseudocode_line=14,
                )

    # --- not found ---
    sb.frontier = ()
    yield sb.build(
        StepKind.EXHAUSTED, ORIGIN,
        f"Open set empty. Exit ({goal[0]},{goal[1]}) is not reachable.",
        pseudocode_line=15,
    )
