"""Bounded FIFO queues: a one-pass linear queue and a circular buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class QueueEmptyError(IndexError):
    """Raised when dequeuing from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when enqueuing into a full queue."""


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")


class LinearQueue:
    """Queue whose slots are used once: space freed by dequeue is not reused."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear."""
        if self.is_full():
            raise QueueFullError(f"queue overflow, cannot enqueue {value!r}")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue underflow")
        value = self._items[self._front]
        self._front += 1
        return value

    def is_empty(self) -> bool:
        return self._front >= len(self._items)

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items) - self._front

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items[self._front:])

    def __str__(self) -> str:
        if self.is_empty():
            return "Queue is empty"
        return "Queue: " + " ".join(str(value) for value in self)


class CircularQueue:
    """Fixed-size ring buffer queue."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._buffer: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear, wrapping around the buffer."""
        if self.is_full():
            raise QueueFullError(f"circular queue overflow, cannot enqueue {value!r}")
        self._buffer[(self._front + self._size) % self.capacity] = value
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("circular queue underflow")
        value = self._buffer[self._front]
        self._buffer[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        if self._size == 0:
            self._front = 0
        return value

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._size):
            yield self._buffer[(self._front + offset) % self.capacity]

    def __str__(self) -> str:
        if self.is_empty():
            return "Circular Queue is empty"
        return "Circular Queue: " + " ".join(str(value) for value in self)