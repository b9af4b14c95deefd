"""Classic data structures and algorithms: arrays, sorting, linked lists,
stacks, queues, binary trees, heaps, hash tables, shortest paths and
locality-sensitive hashing, with runnable demos."""

__version__ = "0.1.0"