"""Classic comparison and distribution sorts, each returning a new list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeated adjacent swaps, stopping once a pass makes no swap."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front each pass."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def shell_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by gapped insertion, halving the gap from half the length down to one."""
    result = list(items)
    n = len(result)
    gap = n // 2
    while gap >= 1:
        for j in range(gap, n):
            i = j - gap
            while i >= 0 and not result[i + gap] > result[i]:
                result[i], result[i + gap] = result[i + gap], result[i]
                i -= gap
        gap //= 2
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def radix_sort(items: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers.

    Raises ValueError if any value is negative.
    """
    result = list(items)
    if not result:
        return result
    if any(value < 0 for value in result):
        raise ValueError("radix sort requires non-negative integers")
    largest = max(result)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in result:
            buckets[(value // exp) % 10].append(value)
        result = [value for bucket in buckets for value in bucket]
        exp *= 10
    return result