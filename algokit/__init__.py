"""Classic sorting, selection, searching, heap, tree, linked-list and puzzle algorithms."""

__version__ = "0.1.0"

__all__ = [
    "counting",
    "heap",
    "linked_list",
    "ordering",
    "puzzles",
    "quicksort",
    "search",
    "selection",
    "sorting",
    "trees",
]