"""Orderings built on the basic sorts: even/odd split, by length, by distance."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from algokit.sorting import merge_sort

__all__ = ["even_odd_sort", "sort_by_name_length", "closest_points"]


def even_odd_sort(values: Iterable[Any]) -> list[Any]:
    """Items at even positions ascending, followed by items at odd positions descending."""
    items = list(values)
    evens = merge_sort(items[0::2])
    odds = merge_sort(items[1::2], descending=True)
    return evens + odds


def sort_by_name_length(pairs: Iterable[tuple[Any, str]]) -> list[tuple[Any, str]]:
    """Order ``(key, name)`` pairs by the length of the name, shortest first."""
    return sorted(pairs, key=lambda pair: len(pair[1]))


def closest_points(
    points: Iterable[tuple[float, float]], k: int
) -> list[tuple[tuple[float, float], float]]:
    """Return the ``k`` points nearest the origin with their distances, nearest first."""
    measured = [((x, y), math.hypot(x, y)) for x, y in points]
    if not 0 <= k <= len(measured):
        raise ValueError(f"k must be between 0 and {len(measured)}, got {k}")
    measured.sort(key=lambda entry: entry[1])
    return measured[:k]