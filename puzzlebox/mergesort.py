"""Merge sort of integer lists."""

from __future__ import annotations

from collections.abc import Sequence


def merge_sort(values: Sequence[int]) -> list[int]:
    """Return a new list holding ``values`` in ascending order."""
    if len(values) <= 1:
        return list(values)
    middle = len(values) // 2
    first = merge_sort(values[:middle])
    second = merge_sort(values[middle:])

    merged: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if second[j] <= first[i]:
            merged.append(second[j])
            j += 1
        else:
            merged.append(first[i])
            i += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged