"""Simulation engine: animation state, run loop, and frame-log persistence."""

from snowtrail.simulation.engine import RunSummary, run_animation
from snowtrail.simulation.persistence import flush_frame_columns, new_frame_columns
from snowtrail.simulation.state import AnimationClock, AnimationState, StepRecord

__all__ = [
    "AnimationClock",
    "AnimationState",
    "RunSummary",
    "StepRecord",
    "flush_frame_columns",
    "new_frame_columns",
    "run_animation",
]
