"""In-place integer sorts."""

from __future__ import annotations

from typing import MutableSequence


def bubble_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place, stopping early once a pass makes no swap."""
    for end in range(len(values) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break


def _partition(values: MutableSequence[int], low: int, high: int) -> int:
    pivot = values[low]
    left, right = low, high
    while left < right:
        while left < right and values[right] >= pivot:
            right -= 1
        values[left] = values[right]
        while left < right and values[left] < pivot:
            left += 1
        values[right] = values[left]
    values[left] = pivot
    return left


def quick_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place using the first element of each range as pivot."""
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if high <= low:
            continue
        mid = _partition(values, low, high)
        pending.append((low, mid - 1))
        pending.append((mid + 1, high))