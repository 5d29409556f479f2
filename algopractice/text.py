"""String algorithms."""

from __future__ import annotations

from collections import Counter
from typing import Iterable


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; the earliest one wins a tie."""
    if len(s) < 2:
        return s
    best = s[0]
    for start in range(len(s)):
        for end in range(len(s), start + 1, -1):
            candidate = s[start:end]
            if len(candidate) > len(best) and candidate == candidate[::-1]:
                best = candidate
    return best


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def find_anagrams(s: str, p: str) -> list[int]:
    """Start indices of the substrings of ``s`` that are anagrams of ``p``.

    When ``s`` and ``p`` have the same length but different first
    characters, no match is reported.
    """
    if not s or not p or len(s) < len(p):
        return []
    if s == p:
        return [0]
    if len(s) == len(p) and s[0] != p[0]:
        return []
    width = len(p)
    target = Counter(p)
    window = Counter(s[:width])
    result: list[int] = []
    for start in range(len(s) - width + 1):
        if start:
            outgoing = s[start - 1]
            window[outgoing] -= 1
            if window[outgoing] == 0:
                del window[outgoing]
            window[s[start + width - 1]] += 1
        if window == target:
            result.append(start)
    return result


def title_to_number(column_title: str) -> int:
    """Sum, over the title's bytes, of each byte's offset from ``A`` plus 26 times its position."""
    return sum(
        (byte - ord("A")) % 256 + position * 26
        for position, byte in enumerate(column_title.encode())
    )