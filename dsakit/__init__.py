"""Classic data structures and algorithms: stacks, queues, sorting, expressions, trees and graphs."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "binary_tree",
    "bst",
    "bst_metrics",
    "expressions",
    "graph",
    "queues",
    "search",
    "sorting",
    "stacks",
]