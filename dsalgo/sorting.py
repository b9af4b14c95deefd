"""In-place sorting algorithms: insertion, counting, merge and binary radix sort."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def insert(items: MutableSequence[Any], index: int) -> None:
    """Move ``items[index]`` left until ``items[:index + 1]`` is sorted.

    Assumes ``items[:index]`` is already sorted.
    """
    if not 0 <= index < len(items):
        raise IndexError(f"index {index} out of range for length {len(items)}")
    for j in range(index, 0, -1):
        if items[j - 1] <= items[j]:
            return
        items[j - 1], items[j] = items[j], items[j - 1]


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by repeated insertion."""
    for index in range(1, len(items)):
        insert(items, index)


def counting_sort(items: MutableSequence[int], k: int) -> None:
    """Sort integers drawn from ``range(k)`` in place by counting occurrences."""
    if k < 0:
        raise ValueError("k must be non-negative")
    counts = [0] * k
    for value in items:
        if not 0 <= value < k:
            raise ValueError(f"value {value} outside range [0, {k})")
        counts[value] += 1
    items[:] = [value for value, count in enumerate(counts) for _ in range(count)]


def merge(left: Sequence[T], right: Sequence[T]) -> list[T]:
    """Merge two sorted sequences into a new sorted list, stably."""
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:  # type: ignore[operator]
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with a stable top-down merge sort."""
    if len(items) <= 1:
        return
    middle = len(items) // 2
    left = list(items[:middle])
    right = list(items[middle:])
    merge_sort(left)
    merge_sort(right)
    items[:] = merge(left, right)


def radix_sort(items: MutableSequence[int]) -> None:
    """Sort non-negative integers in place, one binary digit at a time."""
    if not items:
        return
    max_value = max(items)
    num_bits = max_value.bit_length() if max_value > 0 else 1
    values = list(items)
    for bit in range(num_bits):
        mask = 1 << bit
        zeros = [value for value in values if not value & mask]
        ones = [value for value in values if value & mask]
        values = zeros + ones
    items[:] = values