"""Small classic puzzles: town judge, chocolates, Pascal's triangle and others."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any, Optional

__all__ = [
    "find_judge",
    "max_chocolates",
    "chocolates_with_wrappers",
    "pascal_triangle",
    "find_the_winner",
    "tower_of_hanoi",
    "fibonacci",
    "sort_stack",
]


def find_judge(n: int, trust: Iterable[Sequence[int]]) -> Optional[int]:
    """Return the town judge among people ``1..n``, or ``None`` if there is none.

    Each ``(a, b)`` pair in ``trust`` means person ``a`` trusts person ``b``.
    The judge trusts nobody and is trusted by everybody else, so their
    in-degree minus out-degree equals ``n - 1``.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    balance = [0] * (n + 1)
    for pair in trust:
        truster, trusted = pair[0], pair[1]
        for person in (truster, trusted):
            if not 1 <= person <= n:
                raise ValueError(f"person {person} is outside 1..{n}")
        balance[truster] -= 1
        balance[trusted] += 1
    for person in range(1, n + 1):
        if balance[person] == n - 1:
            return person
    return None


def max_chocolates(money: int) -> int:
    """Return the chocolates obtainable with ``money`` by the closed-form rule.

    For even amounts the total is ``money + money // 2 - 1``; for odd amounts
    it is ``money + q + q // 3`` with ``q = money // 3``, plus one more when
    ``(money - 1) // 2`` is odd.
    """
    if money < 1:
        raise ValueError(f"money must be positive, got {money}")
    if money % 2 == 0:
        return money + money // 2 - 1
    third = money // 3
    total = money + third + third // 3
    if ((money - 1) // 2) % 2 == 1:
        total += 1
    return total


def chocolates_with_wrappers(money: int) -> int:
    """Return the chocolates obtainable when three wrappers buy one more.

    Wrappers are traded in repeatedly; leftovers from every round are
    pooled and traded once more at the end.
    """
    if money < 0:
        raise ValueError(f"money must not be negative, got {money}")
    total = 0
    leftover = 0
    bars = money
    while bars:
        total += bars
        leftover += bars % 3
        bars //= 3
    return total + leftover // 3


def pascal_triangle(rows: int) -> list[list[int]]:
    """Return the first ``rows`` rows of Pascal's triangle."""
    if rows < 0:
        raise ValueError(f"rows must not be negative, got {rows}")
    triangle: list[list[int]] = []
    for i in range(rows):
        if i == 0:
            triangle.append([1])
            continue
        above = triangle[-1]
        inner = [a + b for a, b in zip(above, above[1:])]
        triangle.append([1, *inner, 1])
    return triangle


def find_the_winner(n: int, k: int) -> int:
    """Return the survivor of ``n`` friends in a circle when every ``k``-th leaves."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    circle = deque(range(1, n + 1))
    while len(circle) > 1:
        circle.rotate(-(k - 1))
        circle.popleft()
    return circle[0]


def tower_of_hanoi(
    n: int, source: Any = "A", target: Any = "C", via: Any = "B"
) -> list[tuple[int, Any, Any]]:
    """Return the moves ``(disk, from_rod, to_rod)`` that carry ``n`` disks across."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    moves: list[tuple[int, Any, Any]] = []

    def _move(count: int, start: Any, end: Any, spare: Any) -> None:
        if count == 0:
            return
        _move(count - 1, start, spare, end)
        moves.append((count, start, end))
        _move(count - 1, spare, end, start)

    _move(n, source, target, via)
    return moves


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fibonacci(0) == 0``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def sort_stack(stack: list[Any]) -> None:
    """Sort a list used as a stack in place so the largest item is on top.

    Items are taken from the bottom up and each one is inserted into the
    already sorted stack below any items that are not smaller than it.
    """
    items = list(stack)
    stack.clear()
    for item in items:
        held: list[Any] = []
        while stack and not item > stack[-1]:
            held.append(stack.pop())
        stack.append(item)
        stack.extend(reversed(held))