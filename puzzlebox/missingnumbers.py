"""Find the two numbers missing from a sequence 1..N."""

from __future__ import annotations

import math
from collections.abc import Iterable


def missing(numbers: Iterable[int]) -> list[int]:
    """Return the two numbers of ``1..len(numbers) + 2`` absent from ``numbers``.

    The smaller number comes first. Raises :class:`ValueError` when the
    input cannot be a range with two numbers taken out.
    """
    values = list(numbers)
    total = sum(values)
    squares = sum(value * value for value in values)

    size = len(values) + 2
    diff = size * (size + 1) // 2 - total
    diff_sq = size * (size + 1) * (2 * size + 1) // 6 - squares

    # x + y = diff and x^2 + y^2 = diff_sq give 2x^2 - 2*diff*x + diff^2 - diff_sq = 0
    a, b, c = 2, -2 * diff, diff * diff - diff_sq
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        raise ValueError("numbers are not a range with two values missing")
    root = math.isqrt(discriminant)
    return [(-b - root) // (2 * a), (-b + root) // (2 * a)]