"""Binary-search variants: zero-padded arrays, unbounded search, cube roots, ranges."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from typing import Any, Optional

__all__ = [
    "binary_search_padded",
    "search_unbounded",
    "cube_root",
    "occurrence_range",
]


def _padded_search(
    values: Sequence[Any], low: int, high: int, target: Any
) -> Optional[int]:
    while low <= high:
        mid = (low + high) // 2
        value = values[mid]
        if value == target:
            return mid
        if value > target or value == 0:
            high = mid - 1
        else:
            low = mid + 1
    return None


def binary_search_padded(values: Sequence[Any], target: Any) -> Optional[int]:
    """Find ``target`` in an ascending sequence followed by zero padding.

    A zero marks an unused slot and sends the search left. Returns the index
    found, or ``None`` if the target is absent.
    """
    return _padded_search(values, 0, len(values) - 1, target)


def search_unbounded(values: Sequence[Any], target: Any) -> Optional[int]:
    """Find ``target`` by doubling a probe index, then binary searching the bracket.

    The sequence is ascending and may be followed by zero padding. Returns
    the index found, or ``None``.
    """
    if not values:
        return None
    probe = 1
    while probe < len(values):
        value = values[probe]
        if value == target:
            return probe
        if value > target or value == 0:
            return _padded_search(values, probe // 2, probe, target)
        probe *= 2
    return _padded_search(values, probe // 2, len(values) - 1, target)


def cube_root(n: int) -> int:
    """Return the integer whose cube is ``n``, found by binary search."""
    if n < 0:
        return -cube_root(-n)
    low, high = 0, n
    while low <= high:
        mid = (low + high) // 2
        cube = mid * mid * mid
        if cube == n:
            return mid
        if cube > n:
            high = mid - 1
        else:
            low = mid + 1
    raise ValueError(f"{n} is not a perfect cube")


def occurrence_range(values: Sequence[Any], target: Any) -> tuple[int, int]:
    """Return the first and last index of ``target`` in an ascending sequence."""
    first = bisect_left(values, target)
    if first == len(values) or values[first] != target:
        raise ValueError(f"{target!r} is not in the sequence")
    return first, bisect_right(values, target) - 1