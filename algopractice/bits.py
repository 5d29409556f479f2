"""Bit counting."""

from __future__ import annotations

_UINT32_MASK = 0xFFFFFFFF


def count_ones(n: int) -> int:
    """Number of set bits in a non-negative ``n``; negative values give 0."""
    return bin(n).count("1") if n > 0 else 0


def hamming_weight(num: int) -> int:
    """Number of set bits in ``num`` taken as an unsigned 32-bit integer."""
    return count_ones(num & _UINT32_MASK)


def count_bits(n: int) -> list[int]:
    """Set-bit counts of every integer from 0 to ``n`` inclusive."""
    if n < -1:
        raise ValueError(f"n must be at least -1, got {n}")
    return [count_ones(i) for i in range(n + 1)]