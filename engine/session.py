"""
session.py — Visualizer Session (the Orchestrator's context)
=============================================================
Everything the visualizer needs to remember between two user actions:

    • size       – maze side length
    • seed       – random seed the current maze was carved with
    • phase      – "generate" (watching the carve) or "solve"
    • algo_key   – selected solver
    • playback   – cursor into the active step sequence

The step sequences themselves are NOT stored.  A (size, seed) pair
always carves the same maze and a solver on a given maze always
produces the same trace, so they are recomputed on demand and memoised.
Steps and grids are immutable, which makes sharing cached runs safe.

Session is a frozen value and every operation is a pure function
returning a new Session, so the web layer can keep it in a cookie
(to_dict / from_dict) and any caller can hold several at once.
"""

import logging
import random
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Optional, Tuple

from maze import Grid
from algorithms import REGISTRY, MazeRun, SolveRun, build_maze, solve
from algorithms.step import Step
from engine import stepper
from engine.recorder import Recorder, RunMetrics
from engine.stepper import Playback


logger = logging.getLogger(__name__)


PHASES: Tuple[str, ...] = ("generate", "solve")
SIZES = range(1, 9)
DEFAULT_SIZE = 5
DEFAULT_ALGO = "bfs"

_SEED_LIMIT = 2 ** 31


@dataclass(frozen=True)
class Session:
    size:     int
    seed:     int
    phase:    str      = "generate"
    algo_key: str      = DEFAULT_ALGO
    playback: Playback = Playback()

    def to_dict(self) -> dict:
        return {
            "size":     self.size,
            "seed":     self.seed,
            "phase":    self.phase,
            "algo_key": self.algo_key,
            "playback": self.playback.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Session":
        session = cls(
            size=int(data["size"]),
            seed=int(data["seed"]),
            phase=data.get("phase", "generate"),
            algo_key=data.get("algo_key", DEFAULT_ALGO),
            playback=Playback.from_dict(data.get("playback", {})),
        )
        _validate(session.size, session.algo_key, session.phase)
        return session


# ---------------------------------------------------------------------------
# Validation (the core trusts its callers; this layer is the caller)
# ---------------------------------------------------------------------------
def _validate(size: int, algo_key: str, phase: str = "generate") -> None:
    if size not in SIZES:
        raise ValueError(f"Maze size must be between {SIZES.start} and {SIZES.stop - 1}, got {size}")
    if algo_key not in REGISTRY:
        raise ValueError(f"Unknown algorithm: {algo_key!r}")
    if phase not in PHASES:
        raise ValueError(f"Unknown phase: {phase!r}")


def new_seed() -> int:
    return random.randrange(_SEED_LIMIT)


# ---------------------------------------------------------------------------
# Memoised runs
# ---------------------------------------------------------------------------
@lru_cache(maxsize=32)
def maze_run(size: int, seed: int) -> MazeRun:
    run = build_maze(size, seed)
    logger.debug("carved %dx%d maze (seed=%d) in %d steps", size, size, seed, len(run.steps))
    return run


@lru_cache(maxsize=64)
def solve_run(size: int, seed: int, algo_key: str) -> SolveRun:
    run = solve(algo_key, maze_run(size, seed).grid)
    logger.debug(
        "%s on %dx%d maze (seed=%d): %d steps, path length %d",
        algo_key, size, size, seed, len(run.steps), run.path_length,
    )
    return run


@lru_cache(maxsize=64)
def solve_metrics(size: int, seed: int, algo_key: str) -> RunMetrics:
    """Analytics for one solver on one maze, recorded once."""
    rec = Recorder()
    rec.start_solve(algo_key, maze_run(size, seed).grid)
    return rec.run_to_completion()


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------
def new_session(
    size: int = DEFAULT_SIZE,
    seed: Optional[int] = None,
    algo_key: str = DEFAULT_ALGO,
    speed: float = stepper.SPEED_PRESETS["medium"],
) -> Session:
    """Carve a fresh maze and position playback at its first generation step."""
    _validate(size, algo_key)
    seed = new_seed() if seed is None else seed
    total = len(maze_run(size, seed).steps)
    return Session(
        size=size, seed=seed, phase="generate", algo_key=algo_key,
        playback=stepper.start(total, speed=speed),
    )


def regenerate(session: Session, seed: Optional[int] = None) -> Session:
    """New maze, same size and solver; back to the generation phase."""
    return new_session(session.size, seed, session.algo_key, session.playback.speed)


def change_size(session: Session, size: int, seed: Optional[int] = None) -> Session:
    return new_session(size, seed, session.algo_key, session.playback.speed)


def switch_phase(session: Session, phase: str) -> Session:
    """Show the carve again, or solve the finished maze with the selected solver."""
    _validate(session.size, session.algo_key, phase)
    updated = replace(session, phase=phase)
    return replace(updated, playback=stepper.start(len(current_steps(updated)), speed=session.playback.speed))


def switch_algorithm(session: Session, algo_key: str) -> Session:
    """Select a solver.  While solving, the new trace replaces the old one."""
    _validate(session.size, algo_key, session.phase)
    updated = replace(session, algo_key=algo_key)
    if updated.phase != "solve":
        return updated
    return replace(updated, playback=stepper.start(len(current_steps(updated)), speed=session.playback.speed))


def with_playback(session: Session, playback: Playback) -> Session:
    return replace(session, playback=playback)


def tick(session: Session) -> Session:
    """Scheduler hook: one auto-play step of the session's playback."""
    return with_playback(session, stepper.advance(session.playback))


# ---------------------------------------------------------------------------
# Read-only accessors
# ---------------------------------------------------------------------------
def final_grid(session: Session) -> Grid:
    return maze_run(session.size, session.seed).grid


def current_steps(session: Session) -> Tuple[Step, ...]:
    if session.phase == "solve":
        return solve_run(session.size, session.seed, session.algo_key).steps
    return maze_run(session.size, session.seed).steps


def current_step(session: Session) -> Step:
    steps = current_steps(session)
    return steps[min(session.playback.index, len(steps) - 1)]
