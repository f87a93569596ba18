"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Generator-based Dijkstra over a finished maze using a min-heap (heapq).

Every passage costs 1, so on a maze Dijkstra walks the same cells in
the same order as BFS and finds the same path at the same cost.  The
point of showing it anyway is the MECHANISM: explicit distance
relaxation and a priority frontier carry over to weighted graphs,
BFS's FIFO queue does not.

Yields a Step at:
  1. Initialise dist[(0,0)] = 0, push (0,0)   →  START
  2. Pop minimum-distance unvisited cell      →  EXPLORE
  3. Successful relaxation, push neighbour    →  ADD
  4. Exit popped                              →  FOUND
  5. Heap empty                               →  EXHAUSTED

No decrease-key: an improved neighbour is pushed again and the older
entry stays in the heap.  When it eventually surfaces its cell is
already visited and it is dropped without a snapshot.  Entries are
(dist, order, cell) where `order` is the cell's first-insertion number,
so equal distances pop in first-come order.
"""

import heapq
from typing import Dict, Generator, List, Set, Tuple

from maze import Coord, Grid, ORIGIN
from algorithms.path import ParentMap, reconstruct_path
from algorithms.step import Step, StepBuilder, StepKind


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(maze):",                          # 0
    "    dist ← {(0,0): 0}",                        # 1
    "    pq ← [(0, (0,0))]; visited ← {}",          # 2
    "    while pq is not empty:",                   # 3
    "        (d, cell) ← pq.pop_min()",             # 4
    "        if cell in visited: continue",         # 5
    "        visited.add(cell)",                    # 6
    "        if cell == exit: return path",         # 7
    "        for nbr through an open wall:",        # 8
    "            if nbr in visited: continue",      # 9
    "            nd ← dist[cell] + 1",              # 10
    "            if nd < dist[nbr]:",               # 11
    "                dist[nbr] ← nd",               # 12
    "                parent[nbr] ← cell",           # 13
    "                pq.push((nd, nbr))",           # 14
    "    return NOT FOUND",                         # 15
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dijkstra(grid: Grid) -> Generator[Step, None, None]:
    goal = grid.goal

    dist:    Dict[Coord, int] = {ORIGIN: 0}
    parents: ParentMap        = {ORIGIN: (None, None)}
    order:   Dict[Coord, int] = {ORIGIN: 0}
    pq: List[Tuple[int, int, Coord]] = [(0, 0, ORIGIN)]      # min-heap
    visited: Set[Coord] = set()

    def frontier() -> List[Coord]:
        return [c for _, _, c in sorted(pq)]

    sb = StepBuilder(grid)
    sb.visited   = visited
    sb.distances = dist
    sb.frontier  = frontier()
    yield sb.build(StepKind.START, ORIGIN, "Dijkstra from (0,0)", pseudocode_line=2)

    while pq:
        d, _, cell = heapq.heappop(pq)
        if cell in visited:
            continue                                   # stale duplicate
        visited.add(cell)

        sb.frontier = frontier()
        yield sb.build(
            StepKind.EXPLORE, cell,
            f"Dijkstra at ({cell[0]},{cell[1]}) | dist={dist[cell]}",
            pseudocode_line=6,
        )

        if cell == goal:
            path = reconstruct_path(parents, goal)
            sb.frontier = ()
            sb.path     = path
            yield sb.build(
                StepKind.FOUND, cell,
                f"Dijkstra found path! Distance: {dist[goal]}",
                pseudocode_line=7,
            )
            return

        for direction, nbr in grid.open_neighbours(cell):
            if nbr in visited:
                continue
            nd = dist[cell] + 1
            if nd >= dist.get(nbr, float("inf")):
                continue

            dist[nbr]    = nd
            parents[nbr] = (cell, direction)
            order.setdefault(nbr, len(order))
            heapq.heappush(pq, (nd, order[nbr], nbr))

            sb.frontier = frontier()
            yield sb.build(
                StepKind.ADD, cell,
                f"Update ({nbr[0]},{nbr[1]}) dist={nd}",
                pseudocode_line=14,
            )

    # --- not found ---
    sb.frontier = ()
    yield sb.build(
        StepKind.EXHAUSTED, ORIGIN,
        f"Priority queue empty. Exit ({goal[0]},{goal[1]}) is not reachable.",
        pseudocode_line=15,
    )
