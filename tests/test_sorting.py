import random

import pytest

from algokit.sorting import (
    bubble_sort,
    insertion_sort,
    merge_runs,
    merge_sort,
    selection_sort,
    stooge_sort,
)


def _random_lists():
    rng = random.Random(20103023)
    cases = [[], [1], [2, 1], [5, 5, 5], [1, 2, 3, 4, 5, 6, 7], [7, 1, 6, 2, 5, 3, 4]]
    for size in (3, 8, 13, 20):
        cases.append([rng.randint(-50, 50) for _ in range(size)])
    return cases


RANDOM_LISTS = _random_lists()


def test_bubble_sort_source_example():
    data = [299, 3267, 51, 1, 49, 876, 23]
    assert bubble_sort(data) == [1, 23, 49, 51, 299, 876, 3267]


def test_bubble_sort_does_not_mutate_input():
    data = [1, 3, 5, 2, 4]
    bubble_sort(data)
    assert data == [1, 3, 5, 2, 4]


@pytest.mark.parametrize("data", RANDOM_LISTS)
def test_bubble_sort_matches_sorted(data):
    assert bubble_sort(data) == sorted(data)


def test_selection_sort_source_example():
    assert selection_sort([92, 312, 59, 10, 4]) == [4, 92, 10, 59, 312]


@pytest.mark.parametrize("data", RANDOM_LISTS)
def test_selection_sort_is_permutation(data):
    assert sorted(selection_sort(data)) == sorted(data)


def test_selection_sort_keeps_sorted_input():
    data = [1, 2, 3, 4, 5, 6, 7]
    assert selection_sort(data) == data


def test_insertion_sort_source_example():
    assert insertion_sort([887, 778, 916, 794]) == [778, 794, 887, 916]


@pytest.mark.parametrize("data", RANDOM_LISTS)
def test_insertion_sort_ascending(data):
    assert insertion_sort(data) == sorted(data)


@pytest.mark.parametrize("data", RANDOM_LISTS)
def test_insertion_sort_descending(data):
    assert insertion_sort(data, descending=True) == sorted(data, reverse=True)


def test_merge_sort_source_example():
    assert merge_sort([20, 334, 51, 1, 4999]) == [1, 20, 51, 334, 4999]


@pytest.mark.parametrize("data", RANDOM_LISTS)
def test_merge_sort_ascending(data):
    assert merge_sort(data) == sorted(data)


@pytest.mark.parametrize("data", RANDOM_LISTS)
def test_merge_sort_descending(data):
    assert merge_sort(data, descending=True) == sorted(data, reverse=True)


def test_merge_runs_ascending():
    left = [-4, 6, 9]
    right = [-1, 3]
    assert merge_runs(left, right) == sorted(left + right)


def test_merge_runs_descending():
    left = [9, 6, -4]
    right = [3, -1]
    assert merge_runs(left, right, descending=True) == sorted(left + right, reverse=True)


def test_merge_runs_prefers_left_on_ties():
    left = [(1.0)]
    right = [1]
    merged = merge_runs(left, right)
    assert merged == [1, 1]
    assert isinstance(merged[0], float)


def test_merge_runs_with_empty_side():
    assert merge_runs([], [1, 2]) == [1, 2]
    assert merge_runs([3, 4], []) == [3, 4]


@pytest.mark.parametrize("data", RANDOM_LISTS)
def test_stooge_sort_matches_sorted(data):
    assert stooge_sort(data) == sorted(data)


def test_stooge_sort_does_not_mutate_input():
    data = [6, 5, 4, 3, 2, 1]
    result = stooge_sort(data)
    assert data == [6, 5, 4, 3, 2, 1]
    assert result == sorted(data)