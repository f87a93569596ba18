"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, GENERATOR, get_algorithm, solve

REGISTRY holds the maze SOLVERS, keyed by the identifier the UI sends:
    {
        "bfs":      AlgoInfo(...),
        "astar":    AlgoInfo(...),
        "dijkstra": AlgoInfo(...),
    }

GENERATOR describes the depth-first carving that builds the maze.
It takes a size instead of a grid, so it lives outside REGISTRY.

AlgoInfo is a lightweight dataclass.  The engine and UI both consume it
so adding a new solver is: write the generator, add one entry here.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from maze import Coord, Grid
from algorithms.step import Step, StepKind

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.generate import generate_maze, build_maze, MazeRun, PSEUDOCODE as _gen_pc
from algorithms.bfs      import bfs      as _bfs,      PSEUDOCODE as _bfs_pc
from algorithms.astar    import astar    as _astar,    PSEUDOCODE as _ast_pc
from algorithms.dijkstra import dijkstra as _dijkstra, PSEUDOCODE as _dij_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    key:               str                    # registry key, e.g. "bfs"
    label:             str                    # human label, e.g. "Breadth-First Search"
    fn:                Callable               # the generator function
    pseudocode:        List[str]              # lines for the side-panel
    frontier_label:    str = ""               # heading of the stack / queue panel
    has_heuristic:     bool = False           # A* — score overlay is meaningful
    complexity_time:   str = ""               # e.g. "O(V + E)"
    complexity_space:  str = ""               # e.g. "O(V)"
    description:       str = ""               # one-liner for the info panel


@dataclass(frozen=True)
class SolveRun:
    """A finished solver trace and the path it reported (empty if none)."""

    algo_key: str
    steps:    Tuple[Step, ...]
    path:     Tuple[Coord, ...]

    @property
    def found(self) -> bool:
        return self.steps[-1].kind is StepKind.FOUND

    @property
    def path_length(self) -> int:
        return max(len(self.path) - 1, 0)

    @property
    def explored(self) -> int:
        return sum(1 for s in self.steps if s.kind is StepKind.EXPLORE)


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
GENERATOR = AlgoInfo(
    key="generate", label="DFS Maze Generation", fn=generate_maze, pseudocode=_gen_pc,
    frontier_label="DFS Stack",
    complexity_time="O(n²)", complexity_space="O(n²)",
    description=(
        "DFS maze generation uses a randomized depth-first search with backtracking "
        "to carve a perfect maze where every cell is reachable."
    ),
)

REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs, pseudocode=_bfs_pc,
        frontier_label="BFS Queue",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description=(
            "BFS (Breadth-First Search) explores all neighbors level by level. "
            "Guarantees the shortest path in unweighted graphs."
        ),
    ),

    "astar": AlgoInfo(
        key="astar", label="A* Search", fn=_astar, pseudocode=_ast_pc,
        frontier_label="A* Open Set",
        has_heuristic=True,
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description=(
            "A* uses a heuristic (Manhattan distance) to guide search toward the goal. "
            "Optimal and typically faster than BFS/Dijkstra."
        ),
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra, pseudocode=_dij_pc,
        frontier_label="Dijkstra Queue",
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description=(
            "Dijkstra's algorithm explores by smallest accumulated cost. Optimal for "
            "weighted graphs; behaves like BFS on uniform-cost mazes."
        ),
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> AlgoInfo:
    """Return the solver's AlgoInfo; unknown keys raise ValueError."""
    info = REGISTRY.get(key)
    if info is None:
        raise ValueError(f"Unknown algorithm: {key!r} (expected one of {', '.join(REGISTRY)})")
    return info


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered solvers in insertion order."""
    return list(REGISTRY.values())


def solve(key: str, grid: Grid) -> SolveRun:
    """Run a solver eagerly and return its whole step sequence plus the path."""
    steps = tuple(get_algorithm(key).fn(grid))
    return SolveRun(algo_key=key, steps=steps, path=steps[-1].path)


__all__ = [
    "AlgoInfo",
    "GENERATOR",
    "MazeRun",
    "REGISTRY",
    "SolveRun",
    "build_maze",
    "generate_maze",
    "get_algorithm",
    "list_algorithms",
    "solve",
]
