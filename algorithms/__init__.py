"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting algorithm the visualizer knows.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict, in hotkey order (1-4):
    {
        "bubble": AlgoInfo(key, label, machine, pseudocode, …),
        …
    }

The controller builds a fresh machine with `info.machine(dataset)` every
time a run starts; the UI reads label, pseudocode and complexity from the
same card.  Adding an algorithm: write a SortMachine subclass, add one
entry here.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Type

from algorithms.base      import SortMachine, StepResult
from algorithms.bubble    import BubbleSort,    PSEUDOCODE as _bubble_pc
from algorithms.quick     import QuickSort,     PSEUDOCODE as _quick_pc
from algorithms.merge     import MergeSort,     PSEUDOCODE as _merge_pc
from algorithms.selection import SelectionSort, PSEUDOCODE as _selection_pc


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                  # registry key, e.g. "quick"
    label:            str                  # human label, e.g. "Quick Sort"
    machine:          Type[SortMachine]    # state-machine class
    pseudocode:       List[str]            # lines for the side-panel
    stable:           bool = False
    in_place:         bool = True
    complexity_time:  str  = ""            # average case
    complexity_space: str  = ""
    description:      str  = ""            # one-liner for the UI card


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", machine=BubbleSort, pseudocode=_bubble_pc,
        stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Swaps neighbours until the largest value bubbles to the end.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", machine=QuickSort, pseudocode=_quick_pc,
        complexity_time="O(n log n)", complexity_space="O(log n)",
        description="Lomuto partition around the last element, explicit range stack.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", machine=MergeSort, pseudocode=_merge_pc,
        stable=True, in_place=False,
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Bottom-up: merges runs of width 1, 2, 4, … through a scratch buffer.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", machine=SelectionSort, pseudocode=_selection_pc,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Finds the minimum of the unsorted tail and swaps it into place.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in hotkey order."""
    return list(REGISTRY.values())


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "SortMachine",
    "StepResult",
    "BubbleSort",
    "QuickSort",
    "MergeSort",
    "SelectionSort",
    "get_algorithm",
    "list_algorithms",
]
