"""Singly linked list built from nodes, with a sentinel node as the head."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional


class Node:
    """A list node; used as a sentinel, it stands for the list that follows it."""

    __slots__ = ("value", "next")

    def __init__(self, value: Any = None, next_node: Optional["Node"] = None) -> None:
        self.value = value
        self.next = next_node

    def insert_after(self, value: Any) -> "Node":
        """Insert a new node holding ``value`` right after this one and return it."""
        self.next = Node(value, self.next)
        return self.next

    def find_predecessor(self, predicate: Callable[[Any], bool]) -> Optional["Node"]:
        """Return the node whose successor's value satisfies ``predicate``, or None."""
        node = self
        while node.next is not None:
            if predicate(node.next.value):
                return node
            node = node.next
        return None

    def delete_after(self) -> None:
        """Unlink the node following this one, if there is one."""
        if self.next is not None:
            self.next = self.next.next

    def to_list(self) -> list[Any]:
        """Return the values of the nodes following this one."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        node = self.next
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"Node({self.value!r})"