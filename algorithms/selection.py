"""
selection.py — Selection Sort
==============================
Cursors:
    i         – first unsorted position
    j         – scan position looking for something smaller
    min_index – smallest value seen so far in this scan

One step is one comparison, or the end-of-scan swap that drops the
minimum into a[i].
"""

from typing import List

from algorithms.base import SortMachine, StepResult


PSEUDOCODE: List[str] = [
    "def selection_sort(a):",                       # 0
    "    for i in 0 .. n-2:",                       # 1
    "        min ← i",                              # 2
    "        for j in i+1 .. n-1:",                 # 3
    "            if a[j] < a[min]: min ← j",        # 4
    "        if min != i: swap(a[i], a[min])",      # 5
    "        a[i] is now in place",                 # 6
]


class SelectionSort(SortMachine):
    PSEUDOCODE = PSEUDOCODE

    def __init__(self, data):
        super().__init__(data)
        self.i = 0
        self.j = 1
        self.min_index = 0

    def step(self) -> StepResult:
        n = self.n
        if self.i >= n - 1:
            return StepResult.DONE

        if self.j < n:
            j, m = self.j, self.min_index
            assert self.i <= m < j, (self.i, m, j)
            self._compare(j, m)
            if self.data[j] < self.data[m]:
                self.min_index = j
                self._note(4, f"a[{j}] = {self.data[j]} is the new minimum.")
            else:
                self._note(3, f"a[{j}] is not smaller than a[{m}].")
            self.j += 1
            return StepResult.MORE

        i, m = self.i, self.min_index
        if m != i:
            self._swap(i, m)
            self._note(5, f"Swap minimum from index {m} into index {i}.")
        else:
            self.data.clear_markers()
            self._note(6, f"a[{i}] was already the minimum.")
        self.data.mark_sorted(i)

        self.i += 1
        self.j = self.i + 1
        self.min_index = self.i
        return StepResult.MORE

    def cursors(self) -> dict:
        return {"i": self.i, "j": self.j, "min_index": self.min_index}
