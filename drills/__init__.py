"""Algorithm and data-structure drills: arrays, strings, sorting, trees, graphs, patterns and concurrency."""

__version__ = "0.1.0"

__all__ = [
    "allocator",
    "arrays",
    "binary_tree",
    "bst",
    "dijkstra",
    "graph",
    "linked_list",
    "metrics",
    "patterns",
    "producer_consumer",
    "sorting",
    "strings",
    "sudoku",
    "thread_pool",
]