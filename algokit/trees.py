"""Binary tree traversals: level order, postorder and per-level sums."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "Node",
    "level_order",
    "postorder_iterative",
    "postorder_recursive",
    "level_sum",
]


@dataclass(eq=False)
class Node:
    """A binary tree node holding a value and optional children."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _levels(root: Optional[Node]) -> Iterator[list[Node]]:
    """Yield the nodes of each level, top level first."""
    if root is None:
        return
    current = deque([root])
    while current:
        yield list(current)
        following: deque[Node] = deque()
        for node in current:
            if node.left is not None:
                following.append(node.left)
            if node.right is not None:
                following.append(node.right)
        current = following


def level_order(root: Optional[Node]) -> list[Any]:
    """Return the tree's values level by level, left to right."""
    return [node.value for level in _levels(root) for node in level]


def postorder_iterative(root: Optional[Node]) -> list[Any]:
    """Return the postorder values using two stacks instead of recursion."""
    if root is None:
        return []
    pending = [root]
    visited: list[Any] = []
    while pending:
        node = pending.pop()
        visited.append(node.value)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    visited.reverse()
    return visited


def postorder_recursive(root: Optional[Node]) -> list[Any]:
    """Return the postorder values: left subtree, right subtree, then node."""
    if root is None:
        return []
    return postorder_recursive(root.left) + postorder_recursive(root.right) + [root.value]


def level_sum(root: Optional[Node], k: int) -> Any:
    """Return the sum of the values on level ``k``, where the root is level 1.

    Levels deeper than the tree sum to zero.
    """
    if root is None:
        raise ValueError("cannot sum a level of an empty tree")
    if k < 1:
        raise ValueError(f"level must be at least 1, got {k}")
    for depth, level in enumerate(_levels(root), start=1):
        if depth == k:
            return sum(node.value for node in level)
    return 0