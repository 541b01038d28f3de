# algokit

Classic algorithms written in plain Python with no third-party
dependencies: comparison sorts, quicksort variants, sorts that count their
work, heaps, randomised selection, binary-search variants, binary tree
traversals, a self-sorting doubly linked list and a handful of well-known
puzzles.

Functions that sort take any iterable and return a new list; the input is
left untouched. The exceptions are `quicksort.partition`, which works in
place on a mutable sequence, `puzzles.sort_stack`, which sorts the list it
is given in place, and `DoublyLinkedList.merge_sort`, which relinks the
list's own nodes.

## Installation

```
pip install .
```

## Modules

### `algokit.sorting`

- `bubble_sort(values)`: ascending bubble sort.
- `selection_sort(values)`: one selection pass per position. The partner
  swapped into each position is the *last* later item smaller than the
  current one, not the overall minimum, so the result is not always fully
  sorted (`[92, 312, 59, 10, 4]` becomes `[4, 92, 10, 59, 312]`).
- `insertion_sort(values, descending=False)`
- `merge_runs(left, right, descending=False)`: merges two runs already
  ordered the same way; on ties the item from `left` comes first.
- `merge_sort(values, descending=False)`: top-down merge sort; the left half
  takes the middle item when the length is odd.
- `stooge_sort(values)`: ascending stooge sort.

### `algokit.quicksort`

- `Pivot`: enum of `LOW`, `HIGH` and `MIDDLE`, with `Pivot.index(low, high)`.
- `partition(values, low, high, pivot=Pivot.HIGH, descending=False)`:
  Lomuto partition of `values[low..high]` in place; returns the pivot's final
  index and raises `IndexError` for an invalid range.
- `quick_sort(values, pivot=Pivot.HIGH, descending=False)`
- `hybrid_quick_sort(values, threshold=10)`: ascending quicksort that hands
  ranges shorter than `threshold` to insertion sort.

### `algokit.counting`

Each function returns a `SortResult` with `items` (the resulting list) and
`count`.

- `bubble_sort_swaps(values)`: counts adjacent swaps; stops early after a pass
  with no swap.
- `selection_sort_count(values)`: the same pass as `sorting.selection_sort`,
  counting every change of the chosen index.
- `merge_sort_count(values)`: fully sorts, but counts only the placement steps
  of the outermost merge (the number of items when there are two or more,
  otherwise zero).
- `insertion_sort_count(values)`: counts how many times an item was shifted.
- `merge_halves(values, mid)`: merges `values[:mid + 1]` with
  `values[mid + 1:]`, both already ascending; raises `ValueError` if `mid` is
  out of range.
- `merge_sorted_halves(values)`: the same, splitting at the middle (the left
  half holds the middle item for odd lengths).

### `algokit.ordering`

- `even_odd_sort(values)`: items at even positions ascending, then items at
  odd positions descending.
- `sort_by_name_length(pairs)`: orders `(key, name)` pairs by `len(name)`,
  stable for equal lengths.
- `closest_points(points, k)`: the `k` points nearest the origin as
  `((x, y), distance)` pairs, nearest first; `ValueError` if `k` is out of
  range.

### `algokit.heap`

- `MinHeap(capacity)`: array-backed min-heap with a fixed capacity.
  - `insert(key)` raises `HeapOverflowError` when full.
  - `decrease_key(index, new_value)` raises `ValueError` if the new value is
    larger and `IndexError` for a bad index.
  - `extract_min()` and `get_min()` raise `IndexError` on an empty heap.
  - `delete_key(index)` removes and returns the key at `index`.
  - `items()` returns the storage array; `len()` and iteration are supported.
- `build_max_heap(values)`: a new list arranged as a max-heap.
- `heap_sort(values)`: ascending heap sort.
- `merge_sorted(lists)`: merges ascending sequences with a min-heap; on equal
  values the earlier sequence is drained first.

### `algokit.selection`

- `kth_smallest(values, k, rng=None)`: the `k`-th smallest item (1-based) by
  random-pivot selection. Pass a `random.Random` for repeatable pivots.
  Raises `ValueError` if `k` is out of range.

### `algokit.trees`

- `Node(value, left=None, right=None)`
- `level_order(root)`, `postorder_iterative(root)`, `postorder_recursive(root)`:
  each returns a list of values; an empty tree gives `[]`.
- `level_sum(root, k)`: sum of the values on level `k` (the root is level 1);
  levels below the tree sum to 0. Raises `ValueError` for an empty tree or
  `k < 1`.

### `algokit.linked_list`

- `DoublyLinkedList(values=())` with `push_front`, `push_back`, `remove`
  (raises `ValueError` if absent), `pop_front` and `pop_back` (raise
  `IndexError` when empty), `merge_sort()` (in place, stable, ascending),
  `len()`, iteration in both directions and `str()` in the form
  `1->3->NULL`.

### `algokit.search`

- `binary_search_padded(values, target)`: binary search in an ascending
  sequence followed by zero padding; returns the index or `None`.
- `search_unbounded(values, target)`: doubles a probe index until it passes the
  target or reaches padding, then binary-searches that bracket; returns the
  index or `None`.
- `cube_root(n)`: integer cube root of a perfect cube (negative `n` allowed);
  `ValueError` otherwise.
- `occurrence_range(values, target)`: `(first, last)` index of `target` in an
  ascending sequence; `ValueError` if absent.

### `algokit.puzzles`

- `find_judge(n, trust)`: the person trusted by all others who trusts nobody,
  or `None`.
- `max_chocolates(money)`: closed-form chocolate count for a positive amount.
- `chocolates_with_wrappers(money)`: chocolates when three wrappers buy one
  more.
- `pascal_triangle(rows)`: the first `rows` rows.
- `find_the_winner(n, k)`: survivor of the circle game where every `k`-th
  friend leaves.
- `tower_of_hanoi(n, source="A", target="C", via="B")`: list of
  `(disk, from_rod, to_rod)` moves.
- `fibonacci(n)`: with `fibonacci(0) == 0`.
- `sort_stack(stack)`: sorts a list used as a stack in place, largest on top.

## Examples

```python
from algokit.sorting import merge_sort
from algokit.heap import MinHeap, merge_sorted
from algokit.puzzles import find_the_winner

merge_sort([20, 334, 51, 1, 4999])
# [1, 20, 51, 334, 4999]

heap = MinHeap(10)
for key in (3, 1, 2, 4, 0):
    heap.insert(key)
heap.extract_min()  # 0

merge_sorted([[1, 3, 5], [4, 6, 7], [2, 7]])
# [1, 2, 3, 4, 5, 6, 7, 7]

find_the_winner(5, 2)  # 3
```

## What it does not do

algokit is a library only. It has no command-line program and reads no
input; the algorithms print nothing and do not trace their steps. They
return their results, which you can inspect or print yourself.

## Running the tests

```
pip install ".[test]"
pytest
```