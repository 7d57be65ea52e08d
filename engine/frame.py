"""
frame.py — Render Snapshot
===========================
A Frame is a frozen-in-time picture of everything the presentation layer
needs to draw one frame:

    • bar heights and their markers
    • comparison / swap / write counters, elapsed time, speed
    • algorithm label and run-state label
    • which pseudocode line ran last, and why

The Controller is the only writer; renderers are pure readers.  Lists are
copied at build time so a Frame never changes under the renderer's feet.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class RunStats:
    comparisons: int   = 0
    swaps:       int   = 0
    writes:      int   = 0
    elapsed_ms:  float = 0.0
    speed_ms:    int   = 0


@dataclass(frozen=True)
class Frame:
    """
    Attributes:
        values          : Current bar heights.
        markers         : Marker value string per bar ("default", "comparing", …).
        stats           : RunStats at the time the frame was built.
        algorithm_key   : Registry key, or "" when nothing is selected.
        algorithm_name  : Human label ("No Algorithm Selected" when idle).
        state           : RunState value ("idle", "ready", "running", …).
        state_label     : Display label (Ready / Running / Paused / Completed).
        step_number     : Steps taken in the current run.
        pseudocode_line : Line of the algorithm's pseudocode that ran last (-1: none).
        explanation     : Plain-English account of the last operation.
        cursors         : Algorithm resume state, for overlays.
    """

    values:          List[int]       = field(default_factory=list)
    markers:         List[str]       = field(default_factory=list)
    stats:           RunStats        = field(default_factory=RunStats)
    algorithm_key:   str             = ""
    algorithm_name:  str             = ""
    state:           str             = "idle"
    state_label:     str             = "Ready"
    step_number:     int             = 0
    pseudocode_line: int             = -1
    explanation:     str             = ""
    cursors:         Dict[str, Any]  = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "values":          list(self.values),
            "markers":         list(self.markers),
            "stats": {
                "comparisons": self.stats.comparisons,
                "swaps":       self.stats.swaps,
                "writes":      self.stats.writes,
                "elapsed_ms":  round(self.stats.elapsed_ms, 1),
                "speed_ms":    self.stats.speed_ms,
            },
            "algorithm_key":   self.algorithm_key,
            "algorithm_name":  self.algorithm_name,
            "state":           self.state,
            "state_label":     self.state_label,
            "step_number":     self.step_number,
            "pseudocode_line": self.pseudocode_line,
            "explanation":     self.explanation,
            "cursors":         dict(self.cursors),
        }
