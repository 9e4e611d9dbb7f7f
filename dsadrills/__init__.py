"""Classic data-structure and algorithm exercises, one module per topic."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "binary_tree",
    "bst",
    "coins",
    "heaps",
    "knapsack",
    "queue_problems",
    "queues",
    "recursion",
    "sequences",
    "stacks",
    "string_dp",
    "strings",
]