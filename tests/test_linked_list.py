import pytest

from algokit.linked_list import DoublyLinkedList


def built_by_push_front(values):
    linked = DoublyLinkedList()
    for value in values:
        linked.push_front(value)
    return linked


def test_push_front_reverses_insertion_order():
    values = [7, 6, 9, 10, 3, 1]
    linked = built_by_push_front(values)
    assert list(linked) == values[::-1]
    assert len(linked) == len(values)


def test_push_back_keeps_order():
    values = [4, 2, 8]
    linked = DoublyLinkedList()
    for value in values:
        linked.push_back(value)
    assert list(linked) == values


def test_str_format():
    assert str(DoublyLinkedList([1, 3])) == "1->3->NULL"
    assert str(DoublyLinkedList()) == "NULL"


def test_merge_sort_source_example():
    values = [7, 6, 9, 10, 3, 1]
    linked = built_by_push_front(values)
    linked.merge_sort()
    assert list(linked) == sorted(values)


@pytest.mark.parametrize(
    "values",
    [[], [5], [2, 1], [3, 3, 1, 2, 3], list(range(20, 0, -1)), [0, -5, 12, 7, -5, 8, 1]],
)
def test_merge_sort_sorts_and_relinks(values):
    linked = DoublyLinkedList(values)
    linked.merge_sort()
    assert list(linked) == sorted(values)
    assert list(reversed(linked)) == sorted(values, reverse=True)
    assert len(linked) == len(values)


def test_merge_sort_then_push_back_uses_new_tail():
    linked = DoublyLinkedList([3, 1, 2])
    linked.merge_sort()
    linked.push_back(99)
    assert list(linked) == [1, 2, 3, 99]


def test_remove_first_match():
    linked = DoublyLinkedList([1, 2, 3, 2])
    linked.remove(2)
    assert list(linked) == [1, 3, 2]
    assert list(reversed(linked)) == [2, 3, 1]


def test_remove_head_and_tail():
    linked = DoublyLinkedList([1, 2, 3])
    linked.remove(1)
    linked.remove(3)
    assert list(linked) == [2]
    assert list(reversed(linked)) == [2]


def test_remove_missing_raises():
    with pytest.raises(ValueError):
        DoublyLinkedList([1, 2]).remove(5)


def test_pop_front_and_back():
    linked = DoublyLinkedList([1, 2, 3, 4])
    assert linked.pop_front() == 1
    assert linked.pop_back() == 4
    assert list(linked) == [2, 3]
    assert len(linked) == 2


def test_pop_until_empty():
    linked = DoublyLinkedList([1])
    assert linked.pop_back() == 1
    assert list(linked) == []
    with pytest.raises(IndexError):
        linked.pop_front()
    with pytest.raises(IndexError):
        linked.pop_back()