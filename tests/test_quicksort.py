import random

import pytest

from algokit.quicksort import Pivot, hybrid_quick_sort, partition, quick_sort

HYBRID_SAMPLE = [20, 1, 4, 2, 3, 5, 18, 19, 12, 6, 7, 10, 8, 15, 9, 11, 13, 16, 14, 17]


def _random_lists():
    rng = random.Random(1234)
    lists = [[], [5], [2, 1], [1, 1, 1], list(range(50)), list(range(50, 0, -1))]
    for _ in range(20):
        size = rng.randint(0, 40)
        lists.append([rng.randint(-20, 20) for _ in range(size)])
    return lists


def test_partition_worked_example():
    values = [887, 778, 916, 794]
    split = partition(values, 0, 3)
    assert split == 1
    assert values == [778, 794, 916, 887]


def test_partition_hybrid_sample_first_split():
    values = list(HYBRID_SAMPLE)
    split = partition(values, 0, len(values) - 1)
    assert values[split] == 17
    assert split == 16


@pytest.mark.parametrize("pivot", list(Pivot))
@pytest.mark.parametrize("descending", [False, True])
def test_partition_invariant(pivot, descending):
    rng = random.Random(7)
    for _ in range(30):
        values = [rng.randint(0, 15) for _ in range(rng.randint(1, 25))]
        original = sorted(values)
        split = partition(values, 0, len(values) - 1, pivot, descending)
        pivot_value = values[split]
        assert sorted(values) == original
        if descending:
            assert all(v > pivot_value for v in values[:split])
            assert all(v <= pivot_value for v in values[split + 1:])
        else:
            assert all(v < pivot_value for v in values[:split])
            assert all(v >= pivot_value for v in values[split + 1:])


def test_partition_subrange_leaves_rest_untouched():
    values = [9, 8, 3, 1, 2, 0, 7]
    partition(values, 2, 4)
    assert values[:2] == [9, 8]
    assert values[5:] == [0, 7]
    assert sorted(values[2:5]) == [1, 2, 3]


@pytest.mark.parametrize("low, high", [(-1, 2), (0, 4), (3, 1)])
def test_partition_rejects_bad_range(low, high):
    with pytest.raises(IndexError):
        partition([1, 2, 3, 4], low, high)


@pytest.mark.parametrize("pivot", list(Pivot))
def test_quick_sort_ascending(pivot):
    for values in _random_lists():
        assert quick_sort(values, pivot) == sorted(values)


@pytest.mark.parametrize("pivot", list(Pivot))
def test_quick_sort_descending(pivot):
    for values in _random_lists():
        assert quick_sort(values, pivot, descending=True) == sorted(values, reverse=True)


def test_quick_sort_descending_worked_example():
    assert quick_sort([7, 1, 6, 2, 5, 3, 4], descending=True) == [7, 6, 5, 4, 3, 2, 1]


def test_quick_sort_does_not_mutate_input():
    values = [3, 1, 2]
    result = quick_sort(values)
    assert values == [3, 1, 2]
    assert result == [1, 2, 3]


def test_quick_sort_large_sorted_input():
    values = list(range(5000))
    assert quick_sort(values) == values


def test_hybrid_worked_example():
    assert hybrid_quick_sort(HYBRID_SAMPLE) == list(range(1, 21))


@pytest.mark.parametrize("threshold", [1, 2, 5, 10, 100])
def test_hybrid_matches_sorted(threshold):
    for values in _random_lists():
        assert hybrid_quick_sort(values, threshold) == sorted(values)


def test_hybrid_accepts_iterables():
    assert hybrid_quick_sort(iter([4, 2, 9, 1])) == [1, 2, 4, 9]