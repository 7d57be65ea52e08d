import pytest

from dataset import Dataset, Marker


def test_swap_exchanges_values_and_counts():
    d = Dataset([1, 2, 3])
    d.swap(0, 2)
    assert d.values == [3, 2, 1]
    assert d.swaps == 1
    assert d.comparisons == 0


def test_write_counts_separately_from_swaps():
    d = Dataset([1, 2, 3])
    d.write(1, 9)
    assert d.values == [1, 9, 3]
    assert d.writes == 1
    assert d.swaps == 0


def test_comparison_counter_is_explicit():
    d = Dataset([4, 2])
    d.mark_compare(0, 1)
    assert d.comparisons == 0
    d.count_comparison()
    assert d.comparisons == 1


def test_mark_compare_clears_previous_transient_marks():
    d = Dataset([5, 4, 3, 2])
    d.mark_swapped(0, 1)
    d.mark_compare(2, 3)
    assert d.markers == [Marker.DEFAULT, Marker.DEFAULT, Marker.COMPARING, Marker.COMPARING]


def test_sorted_marks_are_cumulative():
    d = Dataset([5, 4, 3, 2])
    d.mark_sorted(3)
    d.mark_compare(0, 1)
    d.mark_sorted(2)
    d.mark_swapped(0, 1)
    assert d.markers == [Marker.SWAPPING, Marker.SWAPPING, Marker.SORTED, Marker.SORTED]


def test_sorted_index_reverts_after_transient_highlight():
    d = Dataset([1, 2, 3])
    d.mark_sorted(0)
    d.mark_compare(0, 1)
    assert d.markers[0] is Marker.COMPARING
    d.mark_written(2)
    assert d.markers == [Marker.SORTED, Marker.DEFAULT, Marker.SWAPPING]


def test_reset_markers_drops_sorted():
    d = Dataset([1, 2])
    d.mark_all_sorted()
    d.reset_markers()
    assert d.markers == [Marker.DEFAULT, Marker.DEFAULT]


def test_markers_length_tracks_values():
    d = Dataset.generate_random(size=17, seed=3)
    assert len(d.markers) == len(d) == 17


def test_generate_random_range_and_seed():
    a = Dataset.generate_random(size=200, low=50, high=600, seed=7)
    b = Dataset.generate_random(size=200, low=50, high=600, seed=7)
    assert a.values == b.values
    assert all(50 <= v <= 600 for v in a.values)


def test_generate_random_rejects_negative_size():
    with pytest.raises(ValueError):
        Dataset.generate_random(size=-1)


def test_copy_is_independent_and_clean():
    d = Dataset([3, 1, 2])
    d.swap(0, 1)
    d.mark_sorted(0)
    c = d.copy()
    assert c.values == [1, 3, 2]
    assert c.swaps == 0
    assert c.markers == [Marker.DEFAULT] * 3
    c.swap(0, 2)
    assert d.values == [1, 3, 2]


def test_out_of_range_swap_is_a_fault():
    d = Dataset([1, 2])
    with pytest.raises(IndexError):
        d.swap(0, 5)


def test_is_sorted():
    assert Dataset([]).is_sorted()
    assert Dataset([1, 1, 2]).is_sorted()
    assert not Dataset([2, 1]).is_sorted()


def test_to_dict():
    d = Dataset([2, 1])
    d.mark_compare(0, 1)
    assert d.to_dict()["markers"] == ["comparing", "comparing"]
