"""A singly linked list with positional insertion, deletion and search."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: _Node | None = None


class SinglyLinkedList:
    """Linked list of values with 1-based positions, as in the classic exercises."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert_at_begin(self, value: Any) -> None:
        """Put ``value`` in front of the current head."""
        node = _Node(value)
        node.next = self._head
        self._head = node
        self._size += 1

    def insert_at_end(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            current = self._head
            while current.next is not None:
                current = current.next
            current.next = node
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``.

        Valid positions run from 1 to ``len(self) + 1``; others raise IndexError.
        """
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of bounds for size {self._size}")
        if position == 1:
            self.insert_at_begin(value)
            return
        previous = self._node_at(position - 1)
        node = _Node(value)
        node.next = previous.next
        previous.next = node
        self._size += 1

    def delete_at_begin(self) -> Any:
        """Remove the head node and return its value; IndexError if empty."""
        if self._head is None:
            raise IndexError("delete from empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def delete_at_end(self) -> Any:
        """Remove the last node and return its value; IndexError if empty."""
        if self._head is None:
            raise IndexError("delete from empty list")
        if self._head.next is None:
            return self.delete_at_begin()
        second_last = self._head
        while second_last.next is not None and second_last.next.next is not None:
            second_last = second_last.next
        last = second_last.next
        assert last is not None
        second_last.next = None
        self._size -= 1
        return last.data

    def delete_at(self, position: int) -> Any:
        """Remove the node at 1-based ``position`` and return its value.

        Raises IndexError when ``position`` names no node.
        """
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of bounds for size {self._size}")
        if position == 1:
            return self.delete_at_begin()
        previous = self._node_at(position - 1)
        target = previous.next
        assert target is not None
        previous.next = target.next
        self._size -= 1
        return target.data

    def search(self, value: Any) -> int | None:
        """Return the 1-based position of the first node holding ``value``, or None."""
        for position, data in enumerate(self, start=1):
            if data == value:
                return position
        return None

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node