"""
recorder.py — Headless Run Recorder & Comparison
=================================================
Drives a sort machine to completion without any rendering, then reports
the numbers the Comparison panel shows.

Usage:
    rec = Recorder()
    rec.start("quick", dataset)      # works on a copy, `dataset` is untouched
    metrics = rec.run_to_completion()

Comparison Mode:
    Run two Recorders on the SAME values, then compare(rec1, rec2).
    compare_algorithms("bubble", "merge", dataset) does all of that.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Optional

from algorithms import AlgoInfo, SortMachine, StepResult, get_algorithm
from dataset import Dataset

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass: what the Comparison panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:     str   = ""
    algo_label:   str   = ""
    size:         int   = 0
    total_steps:  int   = 0          # step() calls, the final DONE excluded
    comparisons:  int   = 0
    swaps:        int   = 0
    writes:       int   = 0
    wall_time_ms: float = 0.0
    sorted_ok:    bool  = False


# ---------------------------------------------------------------------------
# ComparisonResult: side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_steps:       str = ""   # fewer primitive operations
    winner_comparisons: str = ""
    winner_swaps:       str = ""   # swaps + writes, i.e. data movement


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        data     : Private copy of the input the machine sorts.
        machine  : The SortMachine being driven.
        metrics  : Computed RunMetrics (available after run_to_completion).
    """

    def __init__(self):
        self.data:    Optional[Dataset]     = None
        self.machine: Optional[SortMachine] = None
        self.metrics: Optional[RunMetrics]  = None

        self._algo_info: Optional[AlgoInfo] = None

    def start(self, algo_key: str, data: Dataset) -> None:
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self._algo_info = info
        self.data       = data.copy()
        self.machine    = info.machine(self.data)
        self.metrics    = None

    def run_to_completion(self, max_steps: Optional[int] = None) -> RunMetrics:
        """
        Step until DONE.  `max_steps` defaults to a bound no correct machine
        can reach (4·n² + 64); exceeding it means a machine stopped making
        progress and raises RuntimeError.
        """
        if self.machine is None:
            raise RuntimeError("Call start() first.")

        n = len(self.data)
        limit = max_steps if max_steps is not None else 4 * n * n + 64

        steps = 0
        t0 = time.perf_counter()
        while self.machine.step() is StepResult.MORE:
            steps += 1
            if steps > limit:
                raise RuntimeError(
                    f"{self._algo_info.label} did not finish within {limit} steps"
                )
        wall_ms = (time.perf_counter() - t0) * 1000

        self.metrics = RunMetrics(
            algo_key=self._algo_info.key,
            algo_label=self._algo_info.label,
            size=n,
            total_steps=steps,
            comparisons=self.data.comparisons,
            swaps=self.data.swaps,
            writes=self.data.writes,
            wall_time_ms=round(wall_ms, 2),
            sorted_ok=self.data.is_sorted(),
        )
        logger.debug("recorded %s: %s", self._algo_info.key, self.metrics)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics


# ---------------------------------------------------------------------------
# Comparison helpers
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.algo_label if l_val < r_val else r.algo_label

    return ComparisonResult(
        left=l,
        right=r,
        winner_steps=winner(l.total_steps, r.total_steps),
        winner_comparisons=winner(l.comparisons, r.comparisons),
        winner_swaps=winner(l.swaps + l.writes, r.swaps + r.writes),
    )


def compare_algorithms(left_key: str, right_key: str, data: Dataset) -> ComparisonResult:
    recorders = []
    for key in (left_key, right_key):
        rec = Recorder()
        rec.start(key, data)
        rec.run_to_completion()
        recorders.append(rec)
    return compare(*recorders)
