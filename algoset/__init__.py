"""Classic algorithms on arrays, strings, numbers and linked lists."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "backtracking",
    "linkedlist",
    "numeric",
    "searching",
    "strings",
    "twopointers",
]