"""A complete binary tree laid out level by level in a list."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, Optional


class CompleteTree:
    """A view of the subtree rooted at ``root`` of a list-backed complete tree.

    The children of index ``i`` sit at ``2i + 1`` and ``2i + 2``; only the
    first ``size`` entries of ``storage`` belong to the tree. A view whose
    root lies outside the tree is empty and falsy.
    """

    __slots__ = ("storage", "root", "size")

    def __init__(
        self, storage: MutableSequence[Any], root: int = 0, size: Optional[int] = None
    ) -> None:
        self.storage = storage
        self.root = root
        self.size = len(storage) if size is None else size

    def subtree(self, root: int) -> "CompleteTree":
        """Return the view rooted at index ``root`` of the same tree."""
        return CompleteTree(self.storage, root, self.size)

    @property
    def value(self) -> Any:
        return self.storage[self.root]

    @value.setter
    def value(self, new_value: Any) -> None:
        self.storage[self.root] = new_value

    @property
    def parent(self) -> "CompleteTree":
        """The parent view; empty for the root."""
        if self.root == 0:
            return self.subtree(-1)
        return self.subtree((self.root - 1) // 2)

    @property
    def left(self) -> "CompleteTree":
        return self.subtree(2 * self.root + 1)

    @property
    def right(self) -> "CompleteTree":
        return self.subtree(2 * self.root + 2)

    def __bool__(self) -> bool:
        return 0 <= self.root < self.size

    def __repr__(self) -> str:
        return f"CompleteTree(root={self.root}, size={self.size})"