"""A doubly linked list that can be walked in both directions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("data", "next", "prev")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: _Node | None = None
        self.prev: _Node | None = None


def _format_chain(values: Iterable[Any]) -> str:
    return "".join(f" {value} ->" for value in values) + " NULL"


class DoublyLinkedList:
    """Linked list with forward and backward links and 1-based positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert_at_begin(self, value: Any) -> None:
        """Put ``value`` in front of the current head."""
        node = _Node(value)
        node.next = self._head
        if self._head is not None:
            self._head.prev = node
        else:
            self._tail = node
        self._head = node
        self._size += 1

    def insert_at_end(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``.

        Valid positions run from 1 to ``len(self) + 1``; others raise IndexError.
        """
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of bound for size {self._size}")
        if position == 1:
            self.insert_at_begin(value)
            return
        if position == self._size + 1:
            self.insert_at_end(value)
            return
        previous = self._head
        for _ in range(position - 2):
            assert previous is not None
            previous = previous.next
        assert previous is not None and previous.next is not None
        node = _Node(value)
        node.prev = previous
        node.next = previous.next
        previous.next.prev = node
        previous.next = node
        self._size += 1

    def delete_at_begin(self) -> Any:
        """Remove the head node and return its value; IndexError if empty."""
        if self._head is None:
            raise IndexError("delete from empty list")
        node = self._head
        self._head = node.next
        if self._head is not None:
            self._head.prev = None
        else:
            self._tail = None
        self._size -= 1
        return node.data

    def delete_at_end(self) -> Any:
        """Remove the last node and return its value; IndexError if empty."""
        if self._tail is None:
            raise IndexError("delete from empty list")
        node = self._tail
        self._tail = node.prev
        if self._tail is not None:
            self._tail.next = None
        else:
            self._head = None
        self._size -= 1
        return node.data

    def format_forward(self) -> str:
        """Render the list head to tail as `` a -> b -> NULL``."""
        return _format_chain(self)

    def format_backward(self) -> str:
        """Render the list tail to head as `` b -> a -> NULL``."""
        return _format_chain(reversed(self))