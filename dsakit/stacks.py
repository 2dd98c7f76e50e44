"""Bounded array-backed and unbounded linked stacks."""

from __future__ import annotations

from typing import Any

DEFAULT_CAPACITY = 5


class StackOverflowError(Exception):
    """Raised when pushing onto a full bounded stack."""


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""


class ArrayStack:
    """Last-in first-out stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={self._items!r})"

    def push(self, value: Any) -> None:
        """Put ``value`` on top; StackOverflowError if the stack is full."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError(f"stack overflow: capacity {self.capacity} reached")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; StackUnderflowError if empty."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it; StackUnderflowError if empty."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return not self._items


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next_node: _Node | None) -> None:
        self.data = data
        self.next = next_node


class LinkedStack:
    """Unbounded last-in first-out stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        values = []
        node = self._top
        while node is not None:
            values.append(node.data)
            node = node.next
        return f"{type(self).__name__}(top_first={values!r})"

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value; StackUnderflowError if empty."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        """Return the top value without removing it; StackUnderflowError if empty."""
        if self._top is None:
            raise StackUnderflowError("stack empty")
        return self._top.data

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return self._top is None