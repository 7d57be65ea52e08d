import pytest

from algorithms import StepResult
from dataset import Dataset


class SpyDataset(Dataset):
    """Dataset that independently tallies primitive calls."""

    __slots__ = ("compare_calls", "swap_calls", "write_calls")

    def __init__(self, values=()):
        super().__init__(values)
        self.compare_calls = 0
        self.swap_calls = 0
        self.write_calls = 0

    def count_comparison(self):
        self.compare_calls += 1
        super().count_comparison()

    def swap(self, i, j):
        self.swap_calls += 1
        super().swap(i, j)

    def write(self, k, value):
        self.write_calls += 1
        super().write(k, value)


class FakeClock:
    def __init__(self, t=0.0):
        self.t = t

    def __call__(self):
        return self.t


@pytest.fixture
def spy():
    return SpyDataset


@pytest.fixture
def clock():
    return FakeClock(100.0)


@pytest.fixture
def run_machine():
    """Step a machine until DONE; returns the number of MORE steps."""
    def _run(machine, limit=1_000_000):
        steps = 0
        while machine.step() is StepResult.MORE:
            steps += 1
            assert steps < limit, "machine made no progress"
        return steps
    return _run
