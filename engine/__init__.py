"""
engine/
-------
Playback, recording & session layer.

    from engine import Recorder, compare, Playback, Session
"""

from engine.stepper  import Playback, PlaybackState, SPEED_PRESETS
from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare, compare_all
from engine.session  import Session, new_session, current_step, current_steps

__all__ = [
    "Playback",
    "PlaybackState",
    "SPEED_PRESETS",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "compare_all",
    "Session",
    "new_session",
    "current_step",
    "current_steps",
]
