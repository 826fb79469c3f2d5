"""Classic data structures and algorithms, with demo and LSH benchmark commands."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "binary_tree",
    "bst",
    "demo",
    "formatting",
    "graph",
    "hash_table",
    "heap",
    "linked_list",
    "lsh",
    "ring_queue",
    "shortest_paths",
    "sorting",
    "stack",
    "traversal",
    "tree_print",
]