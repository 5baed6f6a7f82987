"""Classic data structures and algorithms: searching, sorting, stacks, queues,
expression conversion, graphs, linked lists, sparse matrices and binary search
trees."""

__version__ = "0.1.0"

__all__ = [
    "expression",
    "graph",
    "linked_lists",
    "queues",
    "searching",
    "sorting",
    "sparse",
    "stacks",
    "trees",
]