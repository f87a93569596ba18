"""
stepper.py — Step-by-Step Playback
===================================
A cursor over a finished step sequence.  The algorithms have already
produced every Step before playback starts, so the cursor only needs
to know how many steps there are and which one is on screen.

Playback is a frozen value; every operation returns a new Playback.
An external scheduler (the browser's setInterval, a Tk `after` loop,
a test) drives auto-play by calling advance() once per tick:

    pb = start(len(steps))
    pb = play(pb)
    while pb.is_playing:
        pb = advance(pb)
        render(steps[pb.index])

State machine:
    IDLE     →  start()            →  PAUSED
    PAUSED   →  play()             →  PLAYING
    PLAYING  →  pause()            →  PAUSED
    PLAYING  →  advance() at end   →  FINISHED
    FINISHED →  play()             →  PLAYING from step 0
    any      →  reset()            →  IDLE

Playback never reads or writes snapshot content.
"""

from dataclasses import dataclass, replace
from enum import Enum


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class PlaybackState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (seconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1.0,    # teaching mode
    "medium": 0.3,
    "fast":   0.15,   # demo mode
    "turbo":  0.05,
}

MIN_SPEED = 0.02


# ---------------------------------------------------------------------------
# Playback
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Playback:
    """
    Attributes:
        total : Number of steps in the sequence being played.
        index : Step currently displayed (0 when total is 0).
        state : Current PlaybackState.
        speed : Seconds between auto-advance ticks.
    """

    total: int           = 0
    index: int           = 0
    state: PlaybackState = PlaybackState.IDLE
    speed: float         = SPEED_PRESETS["medium"]

    @property
    def last_index(self) -> int:
        return max(self.total - 1, 0)

    @property
    def at_start(self) -> bool:
        return self.index == 0

    @property
    def at_end(self) -> bool:
        return self.index >= self.last_index

    @property
    def is_playing(self) -> bool:
        return self.state == PlaybackState.PLAYING

    @property
    def is_finished(self) -> bool:
        return self.state == PlaybackState.FINISHED

    def to_dict(self) -> dict:
        return {"total": self.total, "index": self.index, "state": self.state.value, "speed": self.speed}

    @classmethod
    def from_dict(cls, data: dict) -> "Playback":
        return cls(
            total=int(data.get("total", 0)),
            index=int(data.get("index", 0)),
            state=PlaybackState(data.get("state", PlaybackState.IDLE.value)),
            speed=float(data.get("speed", SPEED_PRESETS["medium"])),
        )


# ------------------------------------------------------------------
# Lifecycle
# ------------------------------------------------------------------
def start(total: int, speed: float = SPEED_PRESETS["medium"]) -> Playback:
    """Fresh cursor on step 0 of a sequence of `total` steps."""
    return Playback(total=total, index=0, state=PlaybackState.PAUSED, speed=speed)


def reset(pb: Playback) -> Playback:
    return Playback(speed=pb.speed)


# ------------------------------------------------------------------
# Navigation  (manual navigation always pauses)
# ------------------------------------------------------------------
def next_step(pb: Playback) -> Playback:
    if pb.at_end:
        return replace(pb, state=PlaybackState.FINISHED)
    return replace(pb, index=pb.index + 1, state=PlaybackState.PAUSED)


def prev_step(pb: Playback) -> Playback:
    if pb.at_start:
        return pb
    return replace(pb, index=pb.index - 1, state=PlaybackState.PAUSED)


def goto_step(pb: Playback, idx: int) -> Playback:
    """Jump to an arbitrary index.  Out-of-range indices leave `pb` unchanged."""
    if not 0 <= idx < pb.total:
        return pb
    return replace(pb, index=idx, state=PlaybackState.PAUSED)


def rewind(pb: Playback) -> Playback:
    return replace(pb, index=0, state=PlaybackState.PAUSED)


def jump_to_end(pb: Playback) -> Playback:
    return replace(pb, index=pb.last_index, state=PlaybackState.FINISHED)


# ------------------------------------------------------------------
# Play / Pause
# ------------------------------------------------------------------
def play(pb: Playback) -> Playback:
    if pb.state == PlaybackState.IDLE:
        return pb
    index = 0 if pb.at_end else pb.index
    return replace(pb, index=index, state=PlaybackState.PLAYING)


def pause(pb: Playback) -> Playback:
    if pb.state != PlaybackState.PLAYING:
        return pb
    return replace(pb, state=PlaybackState.PAUSED)


def toggle_play(pb: Playback) -> Playback:
    return pause(pb) if pb.is_playing else play(pb)


# ------------------------------------------------------------------
# Tick  (the external scheduler calls this at `speed` intervals)
# ------------------------------------------------------------------
def advance(pb: Playback) -> Playback:
    """One auto-play tick: step forward while playing, finish at the end."""
    if not pb.is_playing:
        return pb
    if pb.at_end:
        return replace(pb, state=PlaybackState.FINISHED)
    return replace(pb, index=pb.index + 1)


# ------------------------------------------------------------------
# Speed
# ------------------------------------------------------------------
def set_speed(pb: Playback, preset: str) -> Playback:
    if preset not in SPEED_PRESETS:
        raise ValueError(f"Unknown speed preset: {preset!r}")
    return replace(pb, speed=SPEED_PRESETS[preset])


def set_speed_value(pb: Playback, seconds: float) -> Playback:
    return replace(pb, speed=max(MIN_SPEED, seconds))


# ------------------------------------------------------------------
# Read-only helpers
# ------------------------------------------------------------------
def progress(pb: Playback) -> float:
    """Fraction i / (len − 1) for the progress bar; 0 for sequences of length ≤ 1."""
    if pb.total <= 1:
        return 0.0
    return pb.index / (pb.total - 1)
