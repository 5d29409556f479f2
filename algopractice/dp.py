"""Dynamic-programming algorithms."""

from __future__ import annotations

from typing import Sequence

_MAX_FALLING_PATH_SIZE = 100


def format_grid(data: Sequence[Sequence[int]]) -> str:
    """Render a grid of integers one row per line, each value followed by a space."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in data)


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Smallest top-to-bottom path sum through a number triangle."""
    if not triangle:
        return 0
    if len(triangle) == 1:
        return triangle[0][0]
    previous = [triangle[0][0]]
    for row in triangle[1:]:
        previous = [
            value + min(previous[max(j - 1, 0) : j + 1])
            for j, value in enumerate(row)
        ]
    return min(previous)


def word_break(s: str, word_dict: Sequence[str]) -> bool:
    """Whether ``s`` can be split into a sequence of words from ``word_dict``."""
    reachable = [True] + [False] * len(s)
    for end in range(1, len(s) + 1):
        prefix = s[:end]
        reachable[end] = any(
            len(word) <= end and prefix.endswith(word) and reachable[end - len(word)]
            for word in word_dict
        )
    return reachable[-1]


def min_falling_path_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Smallest sum of a path falling from the top row to the bottom row.

    Each step moves down to the same column or a neighbouring one. The
    matrix must have between 1 and 100 rows.
    """
    if not 1 <= len(matrix) <= _MAX_FALLING_PATH_SIZE:
        raise ValueError(
            f"matrix must have 1..{_MAX_FALLING_PATH_SIZE} rows, got {len(matrix)}"
        )
    if len(matrix) == 1:
        return matrix[0][0]
    previous = list(matrix[0])
    for row in matrix[1:]:
        previous = [
            value + min(previous[max(j - 1, 0) : j + 2])
            for j, value in enumerate(row)
        ]
    return min(previous)


def generate(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 1:
        raise ValueError(f"num_rows must be at least 1, got {num_rows}")
    rows = [[1]]
    for _ in range(1, num_rows):
        previous = rows[-1]
        rows.append([1, *(a + b for a, b in zip(previous, previous[1:])), 1])
    return rows


def max_product(nums: Sequence[int]) -> int:
    """Largest product of a non-empty contiguous run; 0 for empty input."""
    if not nums:
        return 0
    best = high = low = nums[0]
    for value in nums[1:]:
        candidates = (value, high * value, low * value)
        high, low = max(candidates), min(candidates)
        best = max(best, high)
    return best


def rob(nums: Sequence[int]) -> int:
    """Largest total of values taken with no two adjacent positions."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    before, current = nums[0], max(nums[0], nums[1])
    for value in nums[2:]:
        before, current = current, max(value + before, current)
    return current


def count_primes(n: int) -> int:
    """Number of primes strictly below ``n``, by the sieve of Eratosthenes."""
    if n < 2:
        return 0
    is_prime = [True] * n
    count = 0
    for i in range(2, n):
        if is_prime[i]:
            count += 1
            is_prime[2 * i :: i] = [False] * len(range(2 * i, n, i))
    return count


def count_primes_trial_division(n: int) -> int:
    """Number of primes strictly below ``n``, by trial division."""

    def is_prime(candidate: int) -> bool:
        divisor = 2
        while divisor * divisor <= candidate:
            if candidate % divisor == 0:
                return False
            divisor += 1
        return True

    return sum(1 for candidate in range(2, n) if is_prime(candidate))


def num_squares(n: int) -> int:
    """Fewest perfect squares that sum to ``n``; values up to 3 are returned as is."""
    if n <= 3:
        return n
    fewest = [0] * (n + 1)
    for i in range(1, n + 1):
        best = fewest[i - 1] + 1
        root = 1
        while root * root <= i:
            best = min(best, fewest[i - root * root] + 1)
            root += 1
        fewest[i] = best
    return fewest[n]


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Fewest coins summing to ``amount``, or -1 when it cannot be made."""
    if amount == 0:
        return 0
    if not coins:
        raise ValueError("coins must not be empty")
    if min(coins) <= 0:
        raise ValueError("coin values must be positive")
    ordered = sorted(coins)
    if amount < ordered[0]:
        return -1
    usable = [coin for coin in ordered if coin <= amount]
    unreachable = amount + 1
    fewest = [0] + [unreachable] * amount
    for total in range(1, amount + 1):
        for coin in usable:
            if coin > total:
                break
            fewest[total] = min(fewest[total], fewest[total - coin] + 1)
    return -1 if fewest[amount] == unreachable else fewest[amount]


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; among equals the earliest one wins."""
    if len(s) < 2:
        return s
    best_start, best_end = 0, 1

    def expand(left: int, right: int) -> tuple[int, int]:
        while left >= 0 and right < len(s) and s[left] == s[right]:
            left -= 1
            right += 1
        return left + 1, right

    for center in range(len(s)):
        for start, end in (expand(center, center), expand(center, center + 1)):
            length, best_length = end - start, best_end - best_start
            if length > best_length or (length == best_length and start < best_start):
                best_start, best_end = start, end
    return s[best_start:best_end]


def unique_paths(m: int, n: int) -> int:
    """Number of right/down paths across an ``m`` by ``n`` grid."""
    if m < 0 or n < 0:
        raise ValueError(f"grid dimensions must not be negative, got {m}x{n}")
    if m <= 1 or n <= 1:
        return 1
    row = [1] * m
    for _ in range(1, n):
        for j in range(1, m):
            row[j] += row[j - 1]
    return row[-1]


def unique_paths_with_obstacles(obstacle_grid: Sequence[Sequence[int]]) -> int:
    """Number of right/down paths across a grid avoiding cells marked 1."""
    if not obstacle_grid:
        return 0
    if len(obstacle_grid) == 1:
        return 0 if 1 in obstacle_grid[0] else 1
    if not obstacle_grid[0]:
        return 0
    row_paths = [0] * len(obstacle_grid[0])
    row_paths[0] = 1
    for row in obstacle_grid:
        for j, cell in enumerate(row):
            if cell == 1:
                row_paths[j] = 0
            elif j:
                row_paths[j] += row_paths[j - 1]
    return row_paths[-1]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest right/down path sum from the top-left to the bottom-right cell."""
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one cell")
    row_best: list[int] = []
    for row in grid:
        if not row_best:
            row_best = list(row)
            for j in range(1, len(row_best)):
                row_best[j] += row_best[j - 1]
            continue
        row_best[0] += row[0]
        for j in range(1, len(row)):
            row_best[j] = min(row_best[j], row_best[j - 1]) + row[j]
    return row_best[-1]


def delete_and_earn(nums: Sequence[int]) -> int:
    """Most points earned by taking values, where taking x forbids x-1 and x+1."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    if min(nums) < 0:
        raise ValueError("values must not be negative")
    totals = [0] * (max(nums) + 1)
    for value in nums:
        totals[value] += value
    return rob(totals)