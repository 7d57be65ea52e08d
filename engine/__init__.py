"""
engine/
-------
Run control & recording layer.

    from engine import Controller, Command, Recorder, compare
"""

from engine.frame      import Frame, RunStats
from engine.controller import Controller, Command, RunState, NO_ALGORITHM
from engine.recorder   import (
    Recorder,
    RunMetrics,
    ComparisonResult,
    compare,
    compare_algorithms,
)

__all__ = [
    "Frame",
    "RunStats",
    "Controller",
    "Command",
    "RunState",
    "NO_ALGORITHM",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "compare_algorithms",
]
