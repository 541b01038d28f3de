"""Quicksort variants: selectable pivot, descending order and a hybrid form."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from enum import Enum
from typing import Any

__all__ = ["Pivot", "partition", "quick_sort", "hybrid_quick_sort"]


class Pivot(Enum):
    """Which element of a range is used as the partition pivot."""

    LOW = "low"
    HIGH = "high"
    MIDDLE = "middle"

    def index(self, low: int, high: int) -> int:
        """Return the position of the pivot within ``low..high``."""
        if self is Pivot.LOW:
            return low
        if self is Pivot.HIGH:
            return high
        return (low + high) // 2


def partition(
    values: MutableSequence[Any],
    low: int,
    high: int,
    pivot: Pivot = Pivot.HIGH,
    descending: bool = False,
) -> int:
    """Partition ``values[low..high]`` in place and return the pivot's final index.

    The chosen pivot is moved to ``high`` and a Lomuto scan follows: every
    item that belongs before the pivot (smaller, or larger when
    ``descending``) is swapped to the front of the range.
    """
    if not 0 <= low <= high < len(values):
        raise IndexError(f"invalid range {low}..{high} for length {len(values)}")
    chosen = pivot.index(low, high)
    values[chosen], values[high] = values[high], values[chosen]
    pivot_value = values[high]
    boundary = low
    for j in range(low, high):
        before = values[j] > pivot_value if descending else values[j] < pivot_value
        if before:
            values[boundary], values[j] = values[j], values[boundary]
            boundary += 1
    values[boundary], values[high] = values[high], values[boundary]
    return boundary


def _sort_range(
    items: list[Any], low: int, high: int, pivot: Pivot, descending: bool
) -> None:
    # Recurse into the smaller side and loop on the larger to bound the depth.
    while low < high:
        split = partition(items, low, high, pivot, descending)
        if split - low < high - split:
            _sort_range(items, low, split - 1, pivot, descending)
            low = split + 1
        else:
            _sort_range(items, split + 1, high, pivot, descending)
            high = split - 1


def quick_sort(
    values: Iterable[Any], pivot: Pivot = Pivot.HIGH, descending: bool = False
) -> list[Any]:
    """Return a new list sorted by quicksort with the given pivot choice."""
    items = list(values)
    _sort_range(items, 0, len(items) - 1, pivot, descending)
    return items


def _insertion_sort_range(items: list[Any], low: int, high: int) -> None:
    for i in range(low + 1, high + 1):
        value = items[i]
        j = i
        while j > low and items[j - 1] > value:
            items[j] = items[j - 1]
            j -= 1
        items[j] = value


def hybrid_quick_sort(values: Iterable[Any], threshold: int = 10) -> list[Any]:
    """Return a new ascending list sorted by quicksort that hands small ranges
    (fewer than ``threshold`` items) to insertion sort.
    """
    items = list(values)

    def _sort(low: int, high: int) -> None:
        while low < high:
            if high - low + 1 < threshold:
                _insertion_sort_range(items, low, high)
                return
            split = partition(items, low, high)
            if split - low < high - split:
                _sort(low, split - 1)
                low = split + 1
            else:
                _sort(split + 1, high)
                high = split - 1

    _sort(0, len(items) - 1)
    return items