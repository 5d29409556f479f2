"""Array and interval algorithms."""

from __future__ import annotations

from typing import MutableSequence, Optional, Sequence


def two_sum(nums: Sequence[int], target: int) -> Optional[list[int]]:
    """Return indices ``[j, i]`` of two distinct elements summing to ``target``.

    ``j`` is the last index holding the complement of ``nums[i]``, and ``i``
    is the first position for which such a partner exists. Returns None when
    no pair exists.
    """
    last_index = {value: index for index, value in enumerate(nums)}
    for index, value in enumerate(nums):
        partner = last_index.get(target - value)
        if partner is not None and partner != index:
            return [partner, index]
    return None


def max_area(height: Sequence[int]) -> int:
    """Largest water area held between two of the vertical lines."""
    if not height:
        return 0
    if len(height) == 1:
        return height[0]
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct triples, in ascending order each, that sum to zero."""
    ordered = sorted(nums)
    if len(ordered) < 3 or ordered[0] > 0 or ordered[-1] < 0:
        return []
    result: list[list[int]] = []
    seen: set[tuple[int, int, int]] = set()
    for k, first in enumerate(ordered):
        if first > 0:
            break
        left, right = k + 1, len(ordered) - 1
        while left < right:
            total = first + ordered[left] + ordered[right]
            if total > 0:
                right -= 1
            elif total < 0:
                left += 1
            else:
                triple = (first, ordered[left], ordered[right])
                if triple not in seen:
                    seen.add(triple)
                    result.append(list(triple))
                left += 1
                right -= 1
    return result


def longest_consecutive(nums: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers among ``nums``."""
    present = set(nums)
    best = 0
    for start in present:
        if start - 1 in present:
            continue
        end = start
        while end in present:
            end += 1
        best = max(best, end - start)
    return best


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places in place."""
    if k <= 0:
        return
    if not nums:
        raise ValueError("cannot rotate an empty sequence")
    k %= len(nums)
    if k:
        nums[:] = list(nums[-k:]) + list(nums[:-k])


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Whether any value appears more than once."""
    return len(set(nums)) != len(nums)


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Whether a value recurs within ``k`` places of its first occurrence."""
    first_index: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in first_index:
            if abs(index - first_index[value]) <= k:
                return True
        else:
            first_index[value] = index
    return False


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the other values' order."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Numbers in 1..len(nums) that do not occur in ``nums``.

    Every value must itself lie in 1..len(nums).
    """
    size = len(nums)
    for value in nums:
        if not 1 <= value <= size:
            raise ValueError(f"value {value} is outside 1..{size}")
    present = set(nums)
    return [number for number in range(1, size + 1) if number not in present]


def max_sub_array(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run; 0 for empty input."""
    if not nums:
        return 0
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals, ordered by start."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals, key=lambda interval: interval[0]):
        if merged and merged[-1][0] <= start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged