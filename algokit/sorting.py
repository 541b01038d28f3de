"""Classic comparison sorts: bubble, selection, insertion, merge and stooge."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "merge_runs",
    "merge_sort",
    "stooge_sort",
]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list built by repeated adjacent swaps.

    Each pass bubbles the largest remaining item to the end of the
    unsorted prefix, which then shrinks by one.
    """
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list after one selection pass per position.

    For each position the chosen partner is the *last* later item that is
    smaller than the item currently at that position (not the overall
    minimum), and the two are swapped. On many inputs this yields a fully
    sorted list, but it is not guaranteed to; e.g. ``[92, 312, 59, 10, 4]``
    becomes ``[4, 92, 10, 59, 312]``.
    """
    items = list(values)
    for i, _ in enumerate(items):
        chosen = i
        for j in range(i + 1, len(items)):
            if items[j] < items[i]:
                chosen = j
        items[chosen], items[i] = items[i], items[chosen]
    return items


def insertion_sort(values: Iterable[Any], descending: bool = False) -> list[Any]:
    """Return a new list sorted by inserting each item into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and (items[j] < key if descending else items[j] > key):
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def merge_runs(
    left: Sequence[Any], right: Sequence[Any], descending: bool = False
) -> list[Any]:
    """Merge two runs already ordered the same way into one ordered list.

    On ties the item from ``left`` is taken first.
    """
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        take_left = left[i] >= right[j] if descending else left[i] <= right[j]
        if take_left:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any], descending: bool = False) -> list[Any]:
    """Return a new list sorted by top-down merge sort.

    The left half receives the middle element when the length is odd.
    """
    items = list(values)
    if len(items) <= 1:
        return items
    split = (len(items) + 1) // 2
    return merge_runs(
        merge_sort(items[:split], descending),
        merge_sort(items[split:], descending),
        descending,
    )


def stooge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list sorted by stooge sort.

    Sorts the first two thirds, then the last two thirds, then the first
    two thirds again.
    """
    items = list(values)

    def _sort(low: int, high: int) -> None:
        if items[low] > items[high]:
            items[low], items[high] = items[high], items[low]
        length = high - low + 1
        if length > 2:
            third = length // 3
            _sort(low, high - third)
            _sort(low + third, high)
            _sort(low, high - third)

    if items:
        _sort(0, len(items) - 1)
    return items