"""
base.py — Resumable Sort Machine
=================================
Every algorithm is a small state machine.  One call to step() performs
exactly ONE primitive operation on the Dataset (one comparison, one swap
or one write) and returns:

    StepResult.MORE  – call again, there is work left
    StepResult.DONE  – the array is sorted; nothing was mutated by this call

The machine owns nothing but its cursors.  All mutation goes through the
Dataset primitives so counters and markers stay honest.  Pausing is simply
not calling step(); there is no hidden state in the Python call stack.

Besides cursors, each machine leaves two breadcrumbs for the renderer:
    pseudocode_line – index into the module's PSEUDOCODE list
    explanation     – plain-English account of the last operation
"""

from enum import Enum
from typing import List

from dataset import Dataset


class StepResult(Enum):
    MORE = "more"
    DONE = "done"


class SortMachine:
    """Base class.  Subclasses set PSEUDOCODE and implement step()."""

    PSEUDOCODE: List[str] = []

    def __init__(self, data: Dataset):
        self.data            = data
        self.pseudocode_line = -1
        self.explanation     = ""

    @property
    def n(self) -> int:
        return len(self.data)

    def step(self) -> StepResult:
        raise NotImplementedError

    def _note(self, line: int, explanation: str) -> None:
        self.pseudocode_line = line
        self.explanation     = explanation

    def _compare(self, i: int, j: int) -> None:
        """Count and highlight a comparison between positions i and j."""
        self.data.count_comparison()
        self.data.mark_compare(i, j)

    def _swap(self, i: int, j: int) -> None:
        self.data.swap(i, j)
        self.data.mark_swapped(i, j)

    def cursors(self) -> dict:
        """Snapshot of the resume state, for overlays and tests."""
        return {}
