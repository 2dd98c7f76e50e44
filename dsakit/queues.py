"""Bounded, unbounded and circular first-in first-out queues."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueFullError(Exception):
    """Raised when enqueuing onto a full bounded queue."""


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError(f"capacity must be positive, got {capacity}")


class ArrayQueue:
    """Queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={list(self._items)!r})"

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; QueueFullError if full."""
        if len(self._items) >= self.capacity:
            raise QueueFullError(f"queue overflow: capacity {self.capacity} reached")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; QueueEmptyError if empty."""
        if not self._items:
            raise QueueEmptyError("queue underflow")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front value; QueueEmptyError if empty."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return not self._items


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: _Node | None = None


class LinkedQueue:
    """Unbounded queue built from linked nodes."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        values = []
        node = self._front
        while node is not None:
            values.append(node.data)
            node = node.next
        return f"{type(self).__name__}({values!r})"

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front value; QueueEmptyError if empty."""
        if self._front is None:
            raise QueueEmptyError("queue underflow")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def front(self) -> Any:
        """Return the front value; QueueEmptyError if empty."""
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        return self._front.data

    def rear(self) -> Any:
        """Return the rear value; QueueEmptyError if empty."""
        if self._rear is None:
            raise QueueEmptyError("queue is empty")
        return self._rear.data

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return self._front is None


class CircularQueue:
    """Fixed-size ring buffer queue that reuses freed slots."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        values = [self._slots[(self._front + k) % self.capacity] for k in range(self._count)]
        return f"{type(self).__name__}(capacity={self.capacity}, items={values!r})"

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear, wrapping round; QueueFullError if full."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots[(self._front + self._count) % self.capacity] = value
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the front value; QueueEmptyError if empty."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._count -= 1
        self._front = 0 if self._count == 0 else (self._front + 1) % self.capacity
        return value

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return self._count == 0

    def is_full(self) -> bool:
        """Return True when every slot is taken."""
        return self._count == self.capacity