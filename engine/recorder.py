"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete algorithm run (all Steps), then computes the
analytics metrics the UI needs for the Analytics panel and Comparison
Mode.

Usage:
    rec = Recorder()
    rec.start_generation(size=5, seed=42)
    rec.run_to_completion()          # exhausts the generator
    maze = rec.final_grid

    rec = Recorder()
    rec.start_solve("astar", maze)
    metrics = rec.run_to_completion()
    rec.export()                     # JSON-friendly dump of the run

Comparison Mode:
    compare(rec1, rec2) → ComparisonResult for two finished Recorders on
    the SAME maze; compare_all(maze) runs every registered solver.
"""

import logging
import random
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Generator, List, Optional, Tuple

from maze import Grid
from algorithms import GENERATOR, AlgoInfo, get_algorithm, list_algorithms
from algorithms.step import Step, StepKind, step_to_dict


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str   = ""
    algo_label:      str   = ""
    size:            int   = 0
    explored:        int   = 0          # EXPLORE steps (cells expanded)
    added:           int   = 0          # ADD steps (frontier insertions)
    backtracks:      int   = 0          # BACKTRACK steps (generation only)
    path_length:     int   = 0          # number of edges on the final path
    path_found:      bool  = False
    total_steps:     int   = 0          # number of Steps yielded
    wall_time_ms:    float = 0.0        # wall-clock time to run to completion


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_explored: str = ""   # which algo expanded fewer cells
    winner_path:     str = ""   # which algo found the shorter path


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full tuple of Steps from the run (empty until finished).
        metrics : Computed RunMetrics (available after run_to_completion).
    """

    def __init__(self):
        self.steps:   Tuple[Step, ...]     = ()
        self.metrics: Optional[RunMetrics] = None

        self._algo_info:  Optional[AlgoInfo]                   = None
        self._generator:  Optional[Generator[Step, None, None]] = None
        self._size:       int                                  = 0
        self._seed:       Optional[int]                        = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start_generation(self, size: int, seed: Optional[int] = None) -> None:
        """Prepare a maze-carving run of size × size cells."""
        self._prepare(GENERATOR, size)
        self._seed      = seed
        self._generator = GENERATOR.fn(size, random.Random(seed))

    def start_solve(self, algo_key: str, grid: Grid) -> None:
        """Prepare a solver run on a finished maze.  Unknown keys raise ValueError."""
        info = get_algorithm(algo_key)
        self._prepare(info, grid.size)
        self._generator = info.fn(grid)

    def _prepare(self, info: AlgoInfo, size: int) -> None:
        self._algo_info = info
        self._size      = size
        self._seed      = None
        self.steps      = ()
        self.metrics    = None

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every step, compute metrics."""
        if self._generator is None:
            raise RuntimeError("Call start_generation() or start_solve() first.")

        started = time.monotonic()
        self.steps = tuple(self._generator)
        self._generator = None
        wall_ms = (time.monotonic() - started) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        logger.debug(
            "%s on %dx%d: %d steps, explored=%d, path_length=%d",
            self.metrics.algo_key, self._size, self._size,
            self.metrics.total_steps, self.metrics.explored, self.metrics.path_length,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    @property
    def final_step(self) -> Optional[Step]:
        return self.steps[-1] if self.steps else None

    @property
    def final_grid(self) -> Optional[Grid]:
        last = self.final_step
        return last.grid if last else None

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self, include_grids: bool = False) -> Dict[str, Any]:
        last = self.final_step
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "size":     self._size,
            "seed":     self._seed,
            "grid":     last.grid.to_dict() if last else {},
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [step_to_dict(s, include_grid=include_grids) for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        last = self.final_step

        counts: Dict[StepKind, int] = {}
        for s in self.steps:
            counts[s.kind] = counts.get(s.kind, 0) + 1

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            size=self._size,
            explored=counts.get(StepKind.EXPLORE, 0),
            added=counts.get(StepKind.ADD, 0),
            backtracks=counts.get(StepKind.BACKTRACK, 0),
            path_length=last.path_length if last else 0,
            path_found=bool(last and last.kind is StepKind.FOUND),
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 2),
        )


# ---------------------------------------------------------------------------
# Comparison helpers
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    return ComparisonResult(
        left=l,
        right=r,
        winner_explored=winner(l.explored, r.explored, l.algo_label, r.algo_label),
        winner_path=winner(
            (not l.path_found, l.path_length), (not r.path_found, r.path_length),
            l.algo_label, r.algo_label,
        ),
    )


def compare_all(grid: Grid) -> List[RunMetrics]:
    """Run every registered solver on the same maze, in registry order."""
    results = []
    for info in list_algorithms():
        rec = Recorder()
        rec.start_solve(info.key, grid)
        results.append(rec.run_to_completion())
    return results
