"""
step.py — Algorithm Step Snapshot
==================================
Every algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything the visualizer
needs to render one frame of a maze run:

    • Which cell the algorithm is looking at right now
    • The maze walls as they stood at that instant
    • The carving stack (generation) or the frontier (solvers)
    • The visited / closed cells
    • g / f scores (A*) or the distance map (Dijkstra)
    • The reconstructed path once the exit is found
    • A plain-English message describing the event

Design decisions:
  - Step is a frozen dataclass.  It is a SNAPSHOT.  The algorithm
    generator is the only writer; the stepper / renderer are pure readers.
  - The grid is itself an immutable value, so a Step just keeps a
    reference to it — no deep copy, and no way for later carving to
    leak into earlier steps.
  - Auxiliary state is frozen on the way in: sequences become tuples,
    sets become frozensets, score maps become read-only mapping proxies.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from maze import Coord, Grid


# ---------------------------------------------------------------------------
# Step kinds
# ---------------------------------------------------------------------------
class StepKind(Enum):
    START     = "start"       # solver initialised
    VISIT     = "visit"       # generator entered the first cell
    MOVE      = "move"        # generator carved into a new cell
    BACKTRACK = "backtrack"   # generator popped the stack
    ADD       = "add"         # solver pushed a cell onto its frontier
    EXPLORE   = "explore"     # solver removed a cell from its frontier
    FOUND     = "found"       # solver reached the exit — terminal
    COMPLETE  = "complete"    # generator finished carving — terminal
    EXHAUSTED = "exhausted"   # solver frontier emptied first — terminal


TERMINAL_KINDS = frozenset({StepKind.FOUND, StepKind.COMPLETE, StepKind.EXHAUSTED})

_EMPTY: Mapping[Coord, float] = MappingProxyType({})


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number     : 0-based index of this step in the run.
        kind            : What just happened (StepKind).
        cell            : The cell of interest.
        message         : Human-readable description for the info panel.
        grid            : The maze at this instant.
        stack           : Carving stack, bottom first (generation only).
        frontier        : BFS queue / A* open set / Dijkstra priority list,
                          in the order the algorithm would take them.
        visited         : Cells marked visited by the solver.
        closed          : A* closed list in expansion order.
        g_score         : {coord: g} — A* cost from origin.
        f_score         : {coord: f} — A* g + h.
        distances       : {coord: d} — Dijkstra tentative distances.
        path            : Origin→exit path (empty until found).
        pseudocode_line : 0-based index of the pseudocode line executing now.
        is_final        : True on the very last step.
    """

    step_number:      int
    kind:             StepKind
    cell:             Coord
    message:          str
    grid:             Grid
    stack:            Tuple[Coord, ...]         = ()
    frontier:         Tuple[Coord, ...]         = ()
    visited:          frozenset                 = frozenset()
    closed:           Tuple[Coord, ...]         = ()
    g_score:          Mapping[Coord, float]     = field(default_factory=lambda: _EMPTY)
    f_score:          Mapping[Coord, float]     = field(default_factory=lambda: _EMPTY)
    distances:        Mapping[Coord, float]     = field(default_factory=lambda: _EMPTY)
    path:             Tuple[Coord, ...]         = ()
    pseudocode_line:  int                       = 0
    is_final:         bool                      = False

    @property
    def path_length(self) -> int:
        """Edge count of the path (0 when no path)."""
        return max(len(self.path) - 1, 0)


# ---------------------------------------------------------------------------
# Convenience builder so algorithms don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable scratch-pad that algorithms use to construct Steps cleanly.
    It also owns the running step counter.

    Usage inside an algorithm generator:
        sb = StepBuilder(grid)
        sb.frontier = list(queue)
        sb.visited  = visited
        yield sb.build(StepKind.EXPLORE, (x, y), "Exploring (x,y)")
    """

    def __init__(self, grid: Grid):
        self.grid:             Grid               = grid
        self.stack:            Iterable[Coord]    = ()
        self.frontier:         Iterable[Coord]    = ()
        self.visited:          Iterable[Coord]    = ()
        self.closed:           Iterable[Coord]    = ()
        self.g_score:          Dict[Coord, float] = {}
        self.f_score:          Dict[Coord, float] = {}
        self.distances:        Dict[Coord, float] = {}
        self.path:             Iterable[Coord]    = ()
        self.pseudocode_line:  int                = 0
        self._step_no:         int                = 0

    def build(
        self,
        kind: StepKind,
        cell: Coord,
        message: str,
        pseudocode_line: Optional[int] = None,
    ) -> Step:
        if pseudocode_line is not None:
            self.pseudocode_line = pseudocode_line
        step = Step(
            step_number=self._step_no,
            kind=kind,
            cell=cell,
            message=message,
            grid=self.grid,
            stack=tuple(self.stack),
            frontier=tuple(self.frontier),
            visited=frozenset(self.visited),
            closed=tuple(self.closed),
            g_score=_freeze(self.g_score),
            f_score=_freeze(self.f_score),
            distances=_freeze(self.distances),
            path=tuple(self.path),
            pseudocode_line=self.pseudocode_line,
            is_final=kind in TERMINAL_KINDS,
        )
        self._step_no += 1
        return step


def _freeze(scores: Dict[Coord, float]) -> Mapping[Coord, float]:
    return MappingProxyType(dict(scores)) if scores else _EMPTY


# ---------------------------------------------------------------------------
# Serialisation (for the JSON API)
# ---------------------------------------------------------------------------
def _key(coord: Coord) -> str:
    return f"{coord[0]},{coord[1]}"


def _coords(coords: Iterable[Coord]) -> List[List[int]]:
    return [[x, y] for x, y in coords]


def step_to_dict(step: Step, include_grid: bool = True) -> Dict[str, Any]:
    """JSON-friendly view of a Step.  Score maps are keyed "x,y"."""
    data: Dict[str, Any] = {
        "step_number":     step.step_number,
        "kind":            step.kind.value,
        "cell":            list(step.cell),
        "message":         step.message,
        "stack":           _coords(step.stack),
        "frontier":        _coords(step.frontier),
        "visited":         _coords(sorted(step.visited)),
        "closed":          _coords(step.closed),
        "g_score":         {_key(c): v for c, v in step.g_score.items()},
        "f_score":         {_key(c): v for c, v in step.f_score.items()},
        "distances":       {_key(c): v for c, v in step.distances.items()},
        "path":            _coords(step.path),
        "path_length":     step.path_length,
        "pseudocode_line": step.pseudocode_line,
        "is_final":        step.is_final,
    }
    if include_grid:
        data["grid"] = step.grid.to_dict()
    return data
