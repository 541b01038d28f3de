"""Binary heaps: a bounded min-heap, max-heap building, heap sort and k-way merge."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from typing import Any

__all__ = [
    "HeapOverflowError",
    "MinHeap",
    "build_max_heap",
    "heap_sort",
    "merge_sorted",
]


class HeapOverflowError(Exception):
    """Raised when inserting into a heap that is already at capacity."""


def _parent(i: int) -> int:
    return (i - 1) // 2


class MinHeap:
    """Array-backed binary min-heap with a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for heap of size {len(self)}")

    def _sift_up(self, index: int, *, to_root: bool = False) -> None:
        items = self._items
        while index != 0 and (to_root or items[_parent(index)] > items[index]):
            parent = _parent(index)
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            left, right = 2 * index + 1, 2 * index + 2
            smallest = index
            if left < size and items[left] < items[smallest]:
                smallest = left
            if right < size and items[right] < items[smallest]:
                smallest = right
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def insert(self, key: Any) -> None:
        """Add ``key`` to the heap."""
        if len(self._items) >= self.capacity:
            raise HeapOverflowError(f"heap is full (capacity {self.capacity})")
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def decrease_key(self, index: int, new_value: Any) -> None:
        """Lower the key stored at ``index`` to ``new_value``."""
        self._check_index(index)
        if new_value > self._items[index]:
            raise ValueError(
                f"new value {new_value!r} is greater than current {self._items[index]!r}"
            )
        self._items[index] = new_value
        self._sift_up(index)

    def extract_min(self) -> Any:
        """Remove and return the smallest key."""
        if not self._items:
            raise IndexError("extract_min from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return root

    def delete_key(self, index: int) -> Any:
        """Remove the key at ``index`` and return it."""
        self._check_index(index)
        value = self._items[index]
        self._sift_up(index, to_root=True)
        self.extract_min()
        return value

    def get_min(self) -> Any:
        """Return the smallest key without removing it."""
        if not self._items:
            raise IndexError("get_min from an empty heap")
        return self._items[0]

    def items(self) -> list[Any]:
        """Return the heap's array in storage order."""
        return list(self._items)


def _max_heapify(items: MutableSequence[Any], size: int, index: int) -> None:
    while True:
        left, right = 2 * index + 1, 2 * index + 2
        largest = index
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def build_max_heap(values: Iterable[Any]) -> list[Any]:
    """Return a new list arranged as a binary max-heap."""
    items = list(values)
    for i in range(len(items) // 2 - 1, -1, -1):
        _max_heapify(items, len(items), i)
    return items


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list sorted by heap sort."""
    items = build_max_heap(values)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _max_heapify(items, end, 0)
    return items


def merge_sorted(lists: Iterable[Sequence[Any]]) -> list[Any]:
    """Merge ascending sequences into one ascending list using a min-heap.

    On equal values the sequence given earlier is drained first.
    """
    sources = [list(seq) for seq in lists]
    heap = [(seq[0], which, 0) for which, seq in enumerate(sources) if seq]
    heapq.heapify(heap)
    merged: list[Any] = []
    while heap:
        value, which, pos = heapq.heappop(heap)
        merged.append(value)
        nxt = pos + 1
        if nxt < len(sources[which]):
            heapq.heappush(heap, (sources[which][nxt], which, nxt))
    return merged