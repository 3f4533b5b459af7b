"""Merge-sort inversion counting and quickselect."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence


def _sort_and_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    middle = (len(items) + 1) // 2
    left, left_count = _sort_and_count(items[:middle])
    right, right_count = _sort_and_count(items[middle:])

    merged: list[int] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            count += len(left) - i
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def inversion_count(values: Iterable[int]) -> int:
    """Count pairs i < j with values[i] >= values[j].

    Equal values count as an inversion. The input is left unchanged.
    """
    _, count = _sort_and_count(list(values))
    return count


def partition(values: MutableSequence[int], start: int, end: int) -> int:
    """Partition values[start..end] in place around the last element.

    Elements smaller than the pivot end up before it, the rest after it.
    Returns the pivot's final index.
    """
    pivot = values[end]
    boundary = start
    for j in range(start, end):
        if values[j] < pivot:
            values[boundary], values[j] = values[j], values[boundary]
            boundary += 1
    values[boundary], values[end] = values[end], values[boundary]
    return boundary


def quickselect(values: Iterable[int], k: int) -> int:
    """Return the k-th smallest value, counting from 0. The input is left unchanged."""
    items = list(values)
    if not 0 <= k < len(items):
        raise IndexError(f"k={k} out of range for {len(items)} values")
    start, end = 0, len(items) - 1
    while True:
        pivot_index = partition(items, start, end)
        if pivot_index == k:
            return items[pivot_index]
        if k < pivot_index:
            end = pivot_index - 1
        else:
            start = pivot_index + 1