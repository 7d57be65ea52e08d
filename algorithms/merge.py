"""
merge.py — Merge Sort (bottom-up)
==================================
Bottom-up merge sort never recurses: pass p merges neighbouring runs of
width 2^p.  Every (left, mid, right) merge of every pass is queued up
front, in pass order, so the machine only needs:

    pending  – FIFO of half-open ranges still to merge
    buffer   – copy of a[left:right] taken when the range starts
    i, j     – read cursors into buffer (left run, right run)
    k        – write cursor into a

One step is one comparison-and-write, or one write flushing whatever is
left of a run.  Loading a range happens in the same step as its first
write, so no step is ever idle.

Ties take from the left run, which keeps the sort stable.
"""

from collections import deque
from typing import Deque, List, Tuple

from algorithms.base import SortMachine, StepResult


PSEUDOCODE: List[str] = [
    "def merge_sort(a):",                                   # 0
    "    width ← 1",                                        # 1
    "    while width < n:",                                 # 2
    "        for each (left, mid, right) of this width:",   # 3
    "            buf ← a[left:right];  k ← left",           # 4
    "            while both runs have items:",              # 5
    "                a[k] ← smaller head of buf;  k++",     # 6
    "            copy the rest of the unfinished run",      # 7
    "        width ← 2 · width",                            # 8
]


def merge_ranges(n: int) -> List[Tuple[int, int, int]]:
    """All (left, mid, right) merges of a bottom-up sort, in execution order."""
    ranges = []
    width = 1
    while width < n:
        for left in range(0, n, 2 * width):
            mid   = min(left + width, n)
            right = min(left + 2 * width, n)
            if mid < right:
                ranges.append((left, mid, right))
        width *= 2
    return ranges


class MergeSort(SortMachine):
    PSEUDOCODE = PSEUDOCODE

    def __init__(self, data):
        super().__init__(data)
        self.pending: Deque[Tuple[int, int, int]] = deque(merge_ranges(self.n))
        self.merging = False
        self.final   = False          # True while merging the last, full-width range
        self.left    = 0
        self.mid     = 0
        self.right   = 0
        self.buffer: List[int] = []
        self.i = 0
        self.j = 0
        self.k = 0

    def step(self) -> StepResult:
        if not self.merging:
            if not self.pending:
                return StepResult.DONE
            self._load_range()

        left_len = self.mid - self.left
        total    = self.right - self.left
        assert self.left <= self.k < self.right, (self.left, self.k, self.right)

        if self.i < left_len and self.j < total:
            self._compare(self.left + self.i, self.left + self.j)
            a, b = self.buffer[self.i], self.buffer[self.j]
            if a <= b:
                value = a
                self.i += 1
            else:
                value = b
                self.j += 1
            self._write(value)
            self._note(6, f"Write {value} to index {self.k - 1} (smaller head).")
        elif self.i < left_len:
            value = self.buffer[self.i]
            self.i += 1
            self._write(value)
            self._note(7, f"Right run empty: copy {value} to index {self.k - 1}.")
        else:
            value = self.buffer[self.j]
            self.j += 1
            self._write(value)
            self._note(7, f"Left run empty: copy {value} to index {self.k - 1}.")

        if self.k == self.right:
            self.merging = False
        return StepResult.MORE

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _load_range(self) -> None:
        self.left, self.mid, self.right = self.pending.popleft()
        self.buffer  = self.data.values[self.left:self.right]
        self.i       = 0
        self.j       = self.mid - self.left
        self.k       = self.left
        self.merging = True
        self.final   = not self.pending

    def _write(self, value: int) -> None:
        self.data.write(self.k, value)
        self.data.mark_written(self.k)
        if self.final:
            self.data.mark_sorted(self.k)
        self.k += 1

    def cursors(self) -> dict:
        return {
            "pending": list(self.pending),
            "merging": self.merging,
            "range":   (self.left, self.mid, self.right),
            "i":       self.i,
            "j":       self.j,
            "k":       self.k,
        }
