"""
quick.py — Quick Sort (iterative Lomuto)
=========================================
Recursion is replaced by an explicit work-stack of (low, high) ranges.
`partitioning` tells the machine which kind of step comes next:

  1. Select  – pop the next range.  Ranges with fewer than two elements
               need no work, but popping them still costs one step.
  2. Scan    – compare a[j] with the pivot (a[high]); move smaller values
               left of the partition index i.
  3. Place   – swap the pivot into a[i+1] and push both sub-ranges.

Sub-ranges are pushed low-first, so the high side is processed first
(LIFO).  Order does not matter for correctness.
"""

from typing import List, Tuple

from algorithms.base import SortMachine, StepResult


PSEUDOCODE: List[str] = [
    "def quick_sort(a):",                                   # 0
    "    stack ← [(0, n-1)]",                               # 1
    "    while stack is not empty:",                        # 2
    "        low, high ← stack.pop()",                      # 3
    "        if low >= high: continue",                     # 4
    "        pivot ← a[high];  i ← low - 1",                # 5
    "        for j in low .. high-1:",                      # 6
    "            if a[j] < pivot:",                         # 7
    "                i ← i + 1;  swap(a[i], a[j])",         # 8
    "        swap(a[i+1], a[high]);  p ← i + 1",            # 9
    "        stack.push((low, p-1));  stack.push((p+1, high))",  # 10
]


class QuickSort(SortMachine):
    PSEUDOCODE = PSEUDOCODE

    def __init__(self, data):
        super().__init__(data)
        self.stack: List[Tuple[int, int]] = [(0, self.n - 1)]
        self.partitioning = False
        self.low   = 0
        self.high  = self.n - 1
        self.pivot = 0
        self.i     = 0
        self.j     = 0

    def step(self) -> StepResult:
        if not self.partitioning:
            if not self.stack:
                return StepResult.DONE
            return self._select_range()

        if self.j <= self.high - 1:
            return self._scan()
        return self._place_pivot()

    # ------------------------------------------------------------------
    # Modes
    # ------------------------------------------------------------------
    def _select_range(self) -> StepResult:
        low, high = self.stack.pop()
        self.low, self.high = low, high
        self.data.clear_markers()

        if low < high:
            self.pivot = self.data[high]
            self.i = low - 1
            self.j = low
            self.partitioning = True
            self._note(5, f"Partition [{low}, {high}] around pivot {self.pivot}.")
        else:
            if low == high:
                self.data.mark_sorted(low)
            self._note(4, f"Range [{low}, {high}] has nothing to partition.")
        return StepResult.MORE

    def _scan(self) -> StepResult:
        j, high = self.j, self.high
        assert self.low <= j < high, (self.low, j, high)

        self._compare(j, high)
        if self.data[j] < self.pivot:
            self.i += 1
            self._swap(self.i, j)
            self._note(8, f"a[{j}] < pivot {self.pivot}: move it to index {self.i}.")
        else:
            self._note(7, f"a[{j}] >= pivot {self.pivot}: leave it.")
        self.j += 1
        return StepResult.MORE

    def _place_pivot(self) -> StepResult:
        p = self.i + 1
        # sorted flag first: the swap highlight stays on p for this frame
        self.data.mark_sorted(p)
        self._swap(p, self.high)
        self.stack.append((self.low, p - 1))
        self.stack.append((p + 1, self.high))
        self.partitioning = False
        self._note(10, f"Pivot {self.pivot} lands at index {p}; push both sides.")
        return StepResult.MORE

    def cursors(self) -> dict:
        return {
            "stack":        list(self.stack),
            "partitioning": self.partitioning,
            "low":          self.low,
            "high":         self.high,
            "pivot":        self.pivot,
            "i":            self.i,
            "j":            self.j,
        }
