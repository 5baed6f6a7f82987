"""Singly, doubly and circular linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _SinglyNode:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: _SinglyNode | None = None) -> None:
        self.value = value
        self.next = next


class _DoublyNode:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _DoublyNode | None = None
        self.prev: _DoublyNode | None = None


class SinglyLinkedList:
    """Linked list with forward links only."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _SinglyNode | None = None
        self._size = 0
        for value in reversed(list(values)):
            self.insert_first(value)

    def _node_at(self, index: int) -> _SinglyNode:
        if not 0 <= index < self._size:
            raise IndexError("index out of bounds")
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def insert_first(self, value: Any) -> None:
        """Insert ``value`` at the head."""
        self._head = _SinglyNode(value, self._head)
        self._size += 1

    def insert_last(self, value: Any) -> None:
        """Append ``value`` at the tail."""
        if self._head is None:
            self.insert_first(value)
            return
        self._node_at(self._size - 1).next = _SinglyNode(value)
        self._size += 1

    def insert_at(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if index < 0:
            raise IndexError("index out of bounds")
        if index == 0:
            self.insert_first(value)
            return
        previous = self._node_at(index - 1)
        previous.next = _SinglyNode(value, previous.next)
        self._size += 1

    def delete_first(self) -> Any:
        """Remove and return the head value; None when the list is empty."""
        if self._head is None:
            return None
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def delete_last(self) -> Any:
        """Remove and return the tail value; None when the list is empty."""
        if self._head is None:
            return None
        if self._head.next is None:
            return self.delete_first()
        previous = self._node_at(self._size - 2)
        node = previous.next
        previous.next = None
        self._size -= 1
        return node.value

    def delete_at(self, index: int) -> Any:
        """Remove and return the value at ``index``.

        Index 0 on an empty list does nothing and returns None.
        """
        if index == 0:
            return self.delete_first()
        if not 0 < index < self._size:
            raise IndexError("index out of bounds")
        previous = self._node_at(index - 1)
        node = previous.next
        previous.next = node.next
        self._size -= 1
        return node.value

    def delete_value(self, value: Any) -> None:
        """Remove the first node holding ``value``; an empty list is left alone."""
        if self._head is None:
            return
        if self._head.value == value:
            self.delete_first()
            return
        previous = self._head
        while previous.next is not None and previous.next.value != value:
            previous = previous.next
        if previous.next is None:
            raise ValueError(f"{value!r} not found in the list")
        previous.next = previous.next.next
        self._size -= 1

    def index(self, value: Any) -> int:
        """Return the position of the first node holding ``value``."""
        for position, item in enumerate(self):
            if item == value:
                return position
        raise ValueError(f"{value!r} not found in the list")

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


class DoublyLinkedList:
    """Linked list with forward and backward links."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _DoublyNode | None = None
        self._tail: _DoublyNode | None = None
        self._size = 0
        for value in values:
            self.insert_last(value)

    def _node_at(self, index: int) -> _DoublyNode:
        if not 0 <= index < self._size:
            raise IndexError("index out of bounds")
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def insert_first(self, value: Any) -> None:
        """Insert ``value`` at the head."""
        node = _DoublyNode(value)
        node.next = self._head
        if self._head is not None:
            self._head.prev = node
        else:
            self._tail = node
        self._head = node
        self._size += 1

    def insert_last(self, value: Any) -> None:
        """Append ``value`` at the tail."""
        if self._tail is None:
            self.insert_first(value)
            return
        node = _DoublyNode(value)
        node.prev = self._tail
        self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, index: int, value: Any) -> None:
        """Insert ``value`` at position ``index``.

        On an empty list the value becomes the head whatever the index.
        """
        if self._head is None:
            self.insert_first(value)
            return
        if index < 0:
            raise IndexError("index out of bounds")
        if index == 0:
            self.insert_first(value)
            return
        previous = self._node_at(index - 1)
        if previous is self._tail:
            self.insert_last(value)
            return
        node = _DoublyNode(value)
        node.prev = previous
        node.next = previous.next
        previous.next.prev = node
        previous.next = node
        self._size += 1

    def _unlink(self, node: _DoublyNode) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def delete_first(self) -> Any:
        """Remove and return the head value; None when the list is empty."""
        if self._head is None:
            return None
        return self._unlink(self._head)

    def delete_last(self) -> Any:
        """Remove and return the tail value; None when the list is empty."""
        if self._tail is None:
            return None
        return self._unlink(self._tail)

    def delete_at(self, index: int) -> Any:
        """Remove and return the value at ``index``.

        Index 0 on an empty list does nothing and returns None.
        """
        if index == 0:
            return self.delete_first()
        return self._unlink(self._node_at(index))

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"


class CircularLinkedList:
    """Singly linked ring; iteration goes once around from the head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: _SinglyNode | None = None
        self._size = 0
        for value in values:
            self.insert_last(value)

    def _link_after_tail(self, value: Any) -> _SinglyNode:
        node = _SinglyNode(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1
        return node

    def insert_first(self, value: Any) -> None:
        """Insert ``value`` as the new head."""
        self._link_after_tail(value)

    def insert_last(self, value: Any) -> None:
        """Insert ``value`` just before the head, as the new tail."""
        self._tail = self._link_after_tail(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        head = self._tail.next
        node = head
        while True:
            yield node.value
            node = node.next
            if node is head:
                break

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"