"""Classic algorithm and data-structure exercises: lists, trees, arrays, strings, greedy, DP, sorting."""

__version__ = "0.1.0"

__all__ = [
    "models",
    "lists",
    "lru",
    "strings",
    "trees",
    "tree_queries",
    "tree_construct",
    "bst",
    "arrays",
    "greedy",
    "dynamic",
    "sorting",
]