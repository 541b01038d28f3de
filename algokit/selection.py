"""Randomised selection of the k-th smallest item."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any

__all__ = ["kth_smallest"]


def kth_smallest(
    values: Iterable[Any], k: int, rng: random.Random | None = None
) -> Any:
    """Return the ``k``-th smallest item (1-based) by random-pivot selection.

    Items are split into those smaller than, equal to and larger than a
    randomly chosen pivot, and the search continues in the part that holds
    the wanted rank.
    """
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}, got {k}")
    chooser = rng if rng is not None else random.Random()
    while True:
        pivot = items[chooser.randrange(len(items))]
        small = [v for v in items if v < pivot]
        equal_count = sum(1 for v in items if v == pivot)
        if k <= len(small):
            items = small
        elif k <= len(small) + equal_count:
            return pivot
        else:
            k -= len(small) + equal_count
            items = [v for v in items if v > pivot]