"""Sorts that report how much work they did alongside the sorted result."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from algokit.sorting import merge_runs, merge_sort

__all__ = [
    "SortResult",
    "bubble_sort_swaps",
    "selection_sort_count",
    "merge_sort_count",
    "insertion_sort_count",
    "merge_halves",
    "merge_sorted_halves",
]


@dataclass(frozen=True)
class SortResult:
    """The items a sort produced and the number of operations it counted."""

    items: list[Any]
    count: int


def bubble_sort_swaps(values: Iterable[Any]) -> SortResult:
    """Bubble sort, counting the adjacent swaps performed.

    Stops early once a pass makes no swap.
    """
    items = list(values)
    swaps = 0
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swaps += 1
                swapped = True
        if not swapped:
            break
    return SortResult(items, swaps)


def selection_sort_count(values: Iterable[Any]) -> SortResult:
    """Selection pass per position, counting every change of the chosen index.

    The chosen partner for a position is the last later item smaller than the
    item at that position, so the result is not always fully sorted.
    """
    items = list(values)
    count = 0
    for i, _ in enumerate(items):
        chosen = i
        for j in range(i + 1, len(items)):
            if items[j] < items[i]:
                chosen = j
                count += 1
        items[chosen], items[i] = items[i], items[chosen]
    return SortResult(items, count)


def merge_sort_count(values: Iterable[Any]) -> SortResult:
    """Merge sort, counting the placement steps of the outermost merge only.

    Each placement step puts one element into the output, so the count is the
    number of items for two or more items and zero otherwise.
    """
    items = list(values)
    if len(items) <= 1:
        return SortResult(items, 0)
    split = (len(items) + 1) // 2
    left = merge_sort(items[:split])
    right = merge_sort(items[split:])
    return SortResult(merge_runs(left, right), len(left) + len(right))


def insertion_sort_count(values: Iterable[Any]) -> SortResult:
    """Insertion sort, counting how many times an item was shifted right."""
    items = list(values)
    shifts = 0
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
            shifts += 1
        items[j + 1] = key
    return SortResult(items, shifts)


def merge_halves(values: Iterable[Any], mid: int) -> SortResult:
    """Merge ``values[:mid + 1]`` with ``values[mid + 1:]``, both already ascending.

    ``mid`` is the index of the last item of the left half; the count is the
    number of placement steps, one per item.
    """
    items = list(values)
    if not -1 <= mid < max(len(items), 0) and not (mid == -1 and not items):
        raise ValueError(f"mid {mid} out of range for length {len(items)}")
    return SortResult(merge_runs(items[: mid + 1], items[mid + 1 :]), len(items))


def merge_sorted_halves(values: Iterable[Any]) -> SortResult:
    """Merge a sequence whose two halves are each ascending.

    For an odd length the left half holds the middle item.
    """
    items = list(values)
    return merge_halves(items, (len(items) - 1) // 2)