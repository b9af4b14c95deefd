"""Fixed-capacity stack and reverse-Polish-notation operations on it."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Stack:
    """A last-in first-out stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise IndexError("push onto a full stack")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the value on top of the stack."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the value on top of the stack without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def clear(self) -> None:
        """Remove every value from the stack."""
        self._items.clear()

    def __lshift__(self, value: Any) -> "Stack":
        self.push(value)
        return self

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack(capacity={self._capacity}, items={self._items!r})"


def _pop_operands(stack: Stack) -> tuple[Any, Any]:
    """Pop the top value ``a`` and the one below it ``b``."""
    if len(stack) < 2:
        raise IndexError("operation needs two operands on the stack")
    a = stack.pop()
    b = stack.pop()
    return a, b


def plus(stack: Stack) -> None:
    """Replace the two top values with their sum."""
    a, b = _pop_operands(stack)
    stack.push(a + b)


def minus(stack: Stack) -> None:
    """Replace the two top values with the lower one minus the top one."""
    a, b = _pop_operands(stack)
    stack.push(b - a)


def multiplies(stack: Stack) -> None:
    """Replace the two top values with their product."""
    a, b = _pop_operands(stack)
    stack.push(a * b)


def divides(stack: Stack) -> None:
    """Replace the two top values with the lower one divided by the top one.

    Integers divide with truncation towards zero.
    """
    if len(stack) < 2:
        raise IndexError("operation needs two operands on the stack")
    a = stack.top()
    if a == 0:
        raise ZeroDivisionError("division by zero")
    a, b = _pop_operands(stack)
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(b) // abs(a)
        stack.push(-quotient if (a < 0) != (b < 0) else quotient)
    else:
        stack.push(b / a)


def negate(stack: Stack) -> None:
    """Replace the top value with its negation."""
    stack.push(-stack.pop())