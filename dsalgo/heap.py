"""Binary heaps on list-backed complete trees: heapsort and priority queues.

The ``compare(a, b)`` argument returns true when ``a`` belongs above ``b``;
the default, ``operator.gt``, gives a max-heap.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from typing import Any

from .complete_tree import CompleteTree

Comparison = Callable[[Any, Any], bool]


def heap_sift_up(tree: CompleteTree, compare: Comparison = operator.gt) -> None:
    """Move the value at ``tree`` up towards the root while it beats its parent."""
    parent = tree.parent
    while parent:
        if compare(tree.value, parent.value):
            tree.value, parent.value = parent.value, tree.value
        tree = parent
        parent = tree.parent


def heap_sift_down(tree: CompleteTree, compare: Comparison = operator.gt) -> None:
    """Move the value at ``tree`` down while a child beats it."""
    while True:
        child = tree.left
        other = tree.right
        if not child or (other and compare(other.value, child.value)):
            child = other
        if not child:
            return
        if compare(child.value, tree.value):
            child.value, tree.value = tree.value, child.value
        tree = child


def build_heap(storage: MutableSequence[Any], compare: Comparison = operator.gt) -> None:
    """Rearrange ``storage`` in place into a heap."""
    size = len(storage)
    for index in range(size // 2 - 1, -1, -1):
        heap_sift_down(CompleteTree(storage, index, size), compare)


def heap_sort(storage: MutableSequence[Any], compare: Comparison = operator.gt) -> None:
    """Sort ``storage`` in place; the default comparison sorts ascending."""
    build_heap(storage, compare)
    for back in range(len(storage) - 1, 0, -1):
        storage[0], storage[back] = storage[back], storage[0]
        heap_sift_down(CompleteTree(storage, 0, back), compare)


def priority_enqueue(
    storage: list[Any], value: Any, compare: Comparison = operator.gt
) -> None:
    """Add ``value`` to the heap held in ``storage``."""
    storage.append(value)
    heap_sift_up(CompleteTree(storage, len(storage) - 1), compare)


def priority_dequeue(storage: list[Any], compare: Comparison = operator.gt) -> Any:
    """Remove and return the top value of the heap held in ``storage``."""
    if not storage:
        raise IndexError("dequeue from an empty priority queue")
    storage[0], storage[-1] = storage[-1], storage[0]
    top = storage.pop()
    heap_sift_down(CompleteTree(storage), compare)
    return top