"""Stacks backed by a linked chain of nodes or by a bounded array."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


class StackEmptyError(IndexError):
    """Raised when popping or peeking an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a full bounded stack."""


@dataclass
class _Node:
    value: Any
    next: _Node | None


class LinkedStack:
    """Unbounded stack built from linked nodes."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._top: _Node | None = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackEmptyError("stack is empty, cannot pop")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)[::-1]!r})"


class ArrayStack:
    """Stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack, failing when it is full."""
        if self.is_full():
            raise StackFullError(f"stack is full, cannot push {value!r}")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("stack is empty, cannot pop")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __str__(self) -> str:
        if not self._items:
            return "Stack is empty"
        return "The stack is : " + " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"ArrayStack(capacity={self.capacity}, items={self._items!r})"