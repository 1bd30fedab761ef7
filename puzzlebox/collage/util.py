"""Small helpers for the collage solver."""

from __future__ import annotations

from collections.abc import Callable, Iterable

_MAX_INT16 = 32767


def disjoint(a: Iterable[int] | None, b: Iterable[int] | None) -> bool:
    """Return whether ``a`` and ``b`` share no value."""
    return not set(a or ()) & set(b or ())


def min_index(n: int, key: Callable[[int], int]) -> int:
    """Return the first index in ``range(n)`` with the smallest ``key``.

    Only keys below 32767 are considered; raises :class:`ValueError` if
    there is none.
    """
    best_value, best_index = _MAX_INT16, None
    for index in range(n):
        value = key(index)
        if value < best_value:
            best_value, best_index = value, index
    if best_index is None:
        raise ValueError("no value below the limit")
    return best_index


def max_index(n: int, key: Callable[[int], int]) -> int:
    """Return the first index in ``range(n)`` with the largest positive ``key``, else 0."""
    best_value, best_index = 0, 0
    for index in range(n):
        value = key(index)
        if value > best_value:
            best_value, best_index = value, index
    return best_index