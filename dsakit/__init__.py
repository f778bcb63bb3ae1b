"""Classic data structures and the textbook problems built on them:
linked lists, stacks, queues, binary and n-ary trees, BSTs and heaps."""

__version__ = "0.1.0"

__all__ = [
    "singly_linked",
    "doubly_linked",
    "stacks",
    "queue_problems",
    "queues",
    "binary_tree",
    "tree_construction",
    "bst",
    "nary_tree",
    "heaps",
    "heap_problems",
]