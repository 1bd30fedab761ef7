"""Combinations, permutations and variations of indexes."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterable, Iterator


def combinations(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """Yield every choice of ``k`` of the numbers ``0..n-1`` in ascending order."""
    if k < 1:
        raise ValueError("k must be at least 1")
    return itertools.combinations(range(n), k)


def _heap(items: list[int], n: int) -> Iterator[tuple[int, ...]]:
    if n == 1:
        yield tuple(items)
        return
    for i in range(n - 1):
        yield from _heap(items, n - 1)
        swap = i if n % 2 == 0 else 0
        items[n - 1], items[swap] = items[swap], items[n - 1]
    yield from _heap(items, n - 1)


def permutations(values: Iterable[int]) -> Iterator[tuple[int, ...]]:
    """Yield every ordering of ``values`` in the order of Heap's algorithm."""
    items = list(values)
    if not items:
        return iter([()])
    return _heap(items, len(items))


def variations(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """Yield every ordered choice of ``k`` distinct numbers from ``0..n-1``."""
    chosen = combinations(n, k)
    return (variation for tuple_ in chosen for variation in permutations(tuple_))


def num_variations(n: int, k: int) -> int:
    """Return ``n! / (n-k)!``, the number of variations."""
    if k < 1:
        raise ValueError("k must be at least 1")
    return math.perm(n, k)