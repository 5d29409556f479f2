"""Prefix-sum and prefix-product algorithms."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate
from operator import mul
from typing import Sequence


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of every other element."""
    if not nums:
        return []
    prefix = [1, *accumulate(nums[:-1], mul)]
    suffix = [1, *accumulate(reversed(nums[1:]), mul)][::-1]
    return [before * after for before, after in zip(prefix, suffix)]


class NumArray:
    """Answers inclusive range-sum queries over a fixed list of numbers."""

    def __init__(self, nums: Sequence[int]) -> None:
        self._presum = list(accumulate(nums))

    def sum_range(self, left: int, right: int) -> int:
        """Sum of the elements from ``left`` to ``right`` inclusive."""
        size = len(self._presum)
        if not (0 <= left < size and 0 <= right < size):
            raise IndexError(f"range [{left}, {right}] is outside 0..{size - 1}")
        if left == 0:
            return self._presum[right]
        return self._presum[right] - self._presum[left - 1]


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Number of contiguous runs whose elements sum to ``k``."""
    seen = Counter({0: 1})
    running = 0
    count = 0
    for value in nums:
        running += value
        count += seen[running - k]
        seen[running] += 1
    return count