import pytest

from dataset import Dataset
from engine import Recorder, RunMetrics, compare, compare_algorithms
from engine.recorder import ComparisonResult


@pytest.fixture
def data():
    return Dataset.generate_random(size=50, seed=21)


@pytest.mark.parametrize("key", ["bubble", "quick", "merge", "selection"])
def test_run_to_completion(key, data):
    original = list(data.values)
    rec = Recorder()
    rec.start(key, data)
    metrics = rec.run_to_completion()

    assert metrics.sorted_ok
    assert metrics.size == 50
    assert metrics.total_steps > 0
    assert metrics.comparisons > 0
    assert rec.get_metrics() is metrics
    # works on a copy
    assert data.values == original
    assert data.comparisons == 0


def test_bubble_step_count_is_exact():
    rec = Recorder()
    rec.start("bubble", Dataset([5, 3, 1]))
    metrics = rec.run_to_completion()
    assert metrics.total_steps == 5
    assert (metrics.comparisons, metrics.swaps, metrics.writes) == (3, 3, 0)


def test_merge_reports_writes_not_swaps(data):
    rec = Recorder()
    rec.start("merge", data)
    metrics = rec.run_to_completion()
    assert metrics.swaps == 0
    assert metrics.writes == metrics.total_steps


def test_unknown_algorithm(data):
    with pytest.raises(ValueError):
        Recorder().start("bogo", data)


def test_run_before_start():
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()


def test_step_budget_exceeded(data):
    rec = Recorder()
    rec.start("bubble", data)
    with pytest.raises(RuntimeError, match="did not finish"):
        rec.run_to_completion(max_steps=10)


def test_compare_on_same_data(data):
    result = compare_algorithms("bubble", "merge", data)
    assert isinstance(result, ComparisonResult)
    assert result.left.algo_label == "Bubble Sort"
    assert result.right.algo_label == "Merge Sort"
    assert result.winner_comparisons == "Merge Sort"
    assert result.winner_steps == "Merge Sort"


def test_compare_tie():
    a = Recorder()
    a.start("quick", Dataset([2, 1, 3]))
    a.run_to_completion()
    b = Recorder()
    b.start("quick", Dataset([2, 1, 3]))
    b.run_to_completion()
    result = compare(a, b)
    assert result.winner_steps == "tie"
    assert result.winner_comparisons == "tie"
    assert result.winner_swaps == "tie"


def test_compare_unfinished_recorders_defaults():
    result = compare(Recorder(), Recorder())
    assert result.left == RunMetrics()
    assert result.winner_steps == "tie"
