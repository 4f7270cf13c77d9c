"""Sorting and searching over integer sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by bubbling."""
    items = list(values)
    limit = len(items) - 1
    while limit > 0:
        last_swap = 0
        for j in range(limit):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                last_swap = j
        limit = last_swap
    return items


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return the 1-based position of target in ascending values, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid + 1
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def _merge_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    middle = (len(items) + 1) // 2
    left, left_inv = _merge_count(items[:middle])
    right, right_inv = _merge_count(items[middle:])
    merged: list[int] = []
    inversions = left_inv + right_inv
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            inversions += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def count_inversions(values: Iterable[int]) -> int:
    """Count pairs that stand in decreasing order, by merge sort."""
    return _merge_count(list(values))[1]


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def quicksort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by quicksort."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def linear_search(values: Iterable[int], target: int) -> int | None:
    """Return the 1-based position of the first match, or None."""
    for position, value in enumerate(values, 1):
        if value == target:
            return position
    return None


def tallest(heights: Iterable[int]) -> tuple[int, int]:
    """Return the greatest height and the 1-based position of its first occurrence."""
    best: tuple[int, int] | None = None
    for position, height in enumerate(heights, 1):
        if best is None or height > best[0]:
            best = (height, position)
    if best is None:
        raise ValueError("no heights given")
    return best