"""Positional insertion and deletion on Python lists, plus sequence formatting."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")


def array_insert(items: MutableSequence[T], index: int, value: T) -> None:
    """Insert ``value`` at ``index``, shifting later elements one place right.

    ``index`` may be anything from 0 up to and including ``len(items)``.
    """
    if not 0 <= index <= len(items):
        raise IndexError(
            f"insert position {index} out of range for length {len(items)}"
        )
    items.insert(index, value)


def array_delete(items: MutableSequence[T], index: int) -> None:
    """Remove the element at ``index``, shifting later elements one place left.

    An index outside the sequence leaves it untouched.
    """
    if 0 <= index < len(items):
        del items[index]


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def format_sequence(items: Iterable[Any], prefix: str = "") -> str:
    """Render ``items`` as ``prefix[a, b, c]``."""
    body = ", ".join(_format_value(item) for item in items)
    return f"{prefix}[{body}]"