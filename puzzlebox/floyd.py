"""Floyd's triangle."""

from __future__ import annotations

from itertools import count


def triangle(rows: int) -> list[list[int]]:
    """Return Floyd's triangle with ``rows`` rows."""
    if rows < 0:
        raise ValueError("number of rows must not be negative")
    numbers = count(1)
    return [[next(numbers) for _ in range(row + 1)] for row in range(rows)]