"""Basic array operations: reversal, positional insert and delete, joining and merging."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def reverse_array(items: Iterable[T]) -> list[T]:
    """Return the elements of ``items`` in reverse order."""
    return list(reversed(list(items)))


def delete_at(items: Sequence[T], index: int) -> list[T]:
    """Return a copy of ``items`` without the element at ``index``.

    Raises IndexError when ``index`` is not a position in ``items``.
    """
    if not 0 <= index < len(items):
        raise IndexError(f"deletion index {index} out of range for size {len(items)}")
    return [*items[:index], *items[index + 1:]]


def insert_at(items: Sequence[T], index: int, value: T) -> list[T]:
    """Return a copy of ``items`` with ``value`` placed at ``index``.

    ``index`` may equal the length, which appends. Raises IndexError otherwise.
    """
    if not 0 <= index <= len(items):
        raise IndexError(f"insertion index {index} out of range for size {len(items)}")
    return [*items[:index], value, *items[index:]]


def concatenate(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Return the elements of ``first`` followed by those of ``second``."""
    return [*first, *second]


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Merge two ascending sequences into one ascending list.

    On equal keys the element from ``second`` is taken first.
    """
    left = iter(first)
    right = iter(second)
    merged: list[Any] = []
    sentinel = object()
    a = next(left, sentinel)
    b = next(right, sentinel)
    while a is not sentinel and b is not sentinel:
        if a < b:
            merged.append(a)
            a = next(left, sentinel)
        else:
            merged.append(b)
            b = next(right, sentinel)
    if a is not sentinel:
        merged.append(a)
        merged.extend(left)
    if b is not sentinel:
        merged.append(b)
        merged.extend(right)
    return merged


def traverse_recursive(items: Sequence[T]) -> Iterator[T]:
    """Yield the elements of ``items`` from first to last, visiting the prefix first."""

    def walk(count: int) -> Iterator[T]:
        if count <= 0:
            return
        yield from walk(count - 1)
        yield items[count - 1]

    return walk(len(items))