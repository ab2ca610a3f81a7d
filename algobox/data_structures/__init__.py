"""Trees, heaps, graphs, a linked list, a FIFO queue and a trie."""

__all__ = [
    "avl_tree",
    "b_tree",
    "binary_search_tree",
    "fifo_queue",
    "graph",
    "heap",
    "linked_list",
    "trie",
]