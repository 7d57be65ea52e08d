"""
bubble.py — Bubble Sort
========================
The two nested loops become two cursors:

    i – completed passes (the last i bars are already in place)
    j – position of the pair being compared in the current pass

Each step() is one comparison (plus the swap it may trigger), or the
end-of-pass bookkeeping that marks bar n-1-i as sorted.
"""

from typing import List

from algorithms.base import SortMachine, StepResult


PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",                          # 0
    "    for i in 0 .. n-2:",                       # 1
    "        for j in 0 .. n-2-i:",                 # 2
    "            if a[j] > a[j+1]:",                # 3
    "                swap(a[j], a[j+1])",           # 4
    "        a[n-1-i] is now in place",             # 5
]


class BubbleSort(SortMachine):
    PSEUDOCODE = PSEUDOCODE

    def __init__(self, data):
        super().__init__(data)
        self.i = 0
        self.j = 0

    def step(self) -> StepResult:
        n = self.n
        if self.i >= n - 1:
            return StepResult.DONE

        assert 0 <= self.j <= n - 1 - self.i, (self.i, self.j)

        if self.j < n - 1 - self.i:
            j = self.j
            self._compare(j, j + 1)
            if self.data[j] > self.data[j + 1]:
                self._swap(j, j + 1)
                self._note(4, f"a[{j}] > a[{j + 1}]: swap them.")
            else:
                self._note(3, f"a[{j}] <= a[{j + 1}]: already in order.")
            self.j += 1
            return StepResult.MORE

        # end of pass: the largest remaining value has bubbled up
        self.data.mark_sorted(n - 1 - self.i)
        self._note(5, f"Pass {self.i + 1} done, index {n - 1 - self.i} is in place.")
        self.j = 0
        self.i += 1
        return StepResult.MORE

    def cursors(self) -> dict:
        return {"i": self.i, "j": self.j}
