"""A doubly linked list that can merge-sort its own nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["DoublyLinkedList"]


@dataclass(eq=False)
class _Node:
    value: Any
    prev: Optional["_Node"] = None
    next: Optional["_Node"] = None


def _split(head: _Node) -> tuple[_Node, Optional[_Node]]:
    """Cut a chain in two; the first part keeps the middle node."""
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    second = slow.next
    slow.next = None
    return head, second


def _merge(first: Optional[_Node], second: Optional[_Node]) -> Optional[_Node]:
    """Merge two ascending chains; on ties the node from ``first`` comes first."""
    anchor = _Node(None)
    tail = anchor
    while first is not None and second is not None:
        if first.value <= second.value:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def _sort_chain(head: Optional[_Node]) -> Optional[_Node]:
    if head is None or head.next is None:
        return head
    first, second = _split(head)
    return _merge(_sort_chain(first), _sort_chain(second))


class DoublyLinkedList:
    """A sequence of values linked in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first item."""
        node = _Node(value, None, self._head)
        if self._head is not None:
            self._head.prev = node
        else:
            self._tail = node
        self._head = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last item."""
        node = _Node(value, self._tail, None)
        if self._tail is not None:
            self._tail.next = node
        else:
            self._head = node
        self._tail = node
        self._size += 1

    def _unlink(self, node: _Node) -> Any:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def remove(self, value: Any) -> None:
        """Remove the first item equal to ``value``."""
        for node in self._nodes():
            if node.value == value:
                self._unlink(node)
                return
        raise ValueError(f"{value!r} is not in the list")

    def pop_front(self) -> Any:
        """Remove and return the first item."""
        if self._head is None:
            raise IndexError("pop_front from an empty list")
        return self._unlink(self._head)

    def pop_back(self) -> Any:
        """Remove and return the last item."""
        if self._tail is None:
            raise IndexError("pop_back from an empty list")
        return self._unlink(self._tail)

    def merge_sort(self) -> None:
        """Sort the list in place, ascending, by relinking its nodes."""
        self._head = _sort_chain(self._head)
        previous: Optional[_Node] = None
        for node in self._nodes():
            node.prev = previous
            previous = node
        self._tail = previous