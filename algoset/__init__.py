"""Classic algorithms on arrays, strings, trees, linked lists, grids and graphs."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "dynamic_programming",
    "graphs",
    "linked_lists",
    "matrices",
    "searching",
    "sliding_window",
    "strings",
    "trees",
]