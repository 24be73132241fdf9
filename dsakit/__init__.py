"""Classic data structures (B-tree, binary search tree, queue, stacks, linked list, disjoint sets) with small demos."""

__version__ = "0.1.0"