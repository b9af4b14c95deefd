"""Hash table with separate chaining over singly linked lists."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Optional

from .linked_list import Node


@dataclass
class _Entry:
    key: Any
    value: Any


class HashTable:
    """Map keys to values using ``num_chains`` chains and a caller-given hash."""

    def __init__(
        self, num_chains: int, hash_function: Callable[[Any], int] = hash
    ) -> None:
        if num_chains <= 0:
            raise ValueError("num_chains must be positive")
        self._hash_function = hash_function
        self._chains = [Node() for _ in range(num_chains)]

    @property
    def num_chains(self) -> int:
        return len(self._chains)

    def _chain(self, key: Hashable) -> Node:
        return self._chains[self._hash_function(key) % len(self._chains)]

    def _find(self, key: Any) -> Optional[Node]:
        """Return the node holding the entry for ``key``, or None."""
        predecessor = self._chain(key).find_predecessor(lambda entry: entry.key == key)
        return None if predecessor is None else predecessor.next

    def insert(self, key: Any, value: Any) -> None:
        """Associate ``value`` with ``key``, replacing any earlier value."""
        node = self._find(key)
        if node is None:
            self._chain(key).insert_after(_Entry(key, value))
        else:
            node.value.value = value

    def get(self, key: Any) -> Any:
        """Return the value stored for ``key``, or None if there is none."""
        node = self._find(key)
        return None if node is None else node.value.value

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return sum(self.slot_sizes())

    def slot_sizes(self) -> list[int]:
        """Return the number of entries in each chain, in slot order."""
        return [sum(1 for _ in chain) for chain in self._chains]

    def report(self, details: bool = False) -> str:
        """Describe how entries spread over the slots.

        With ``details`` every slot is listed with its keys first.
        """
        lines = []
        if details:
            for slot, chain in enumerate(self._chains):
                keys = "".join(f" '{entry.key}'" for entry in chain)
                count = sum(1 for _ in chain)
                lines.append(f"Slot {slot} contains{keys} ({count})")
        sizes = self.slot_sizes()
        average = sum(sizes) / len(sizes)
        lines.append(
            f"Slot sizes: min: {min(sizes)}, max: {max(sizes)}, average: {average:g}"
        )
        return "\n".join(lines)