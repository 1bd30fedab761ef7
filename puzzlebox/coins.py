"""Count the ways to split coins into piles."""

from __future__ import annotations


def piles(n: int) -> int:
    """Return the number of ways to split ``n`` coins into piles (partitions of n)."""
    if n < 0:
        raise ValueError("number of coins must not be negative")
    ways = [1] + [0] * n
    for part in range(1, n + 1):
        for total in range(part, n + 1):
            ways[total] += ways[total - part]
    return ways[n]