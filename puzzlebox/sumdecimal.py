"""Sum of the first thousand decimals of a square root."""

from __future__ import annotations

import math

_DIGITS = 1000


def sum_decimal(c: int) -> int:
    """Return the sum of the first 1000 decimal digits of the square root of ``c``.

    Non-positive inputs give 0, as do perfect squares.
    """
    if c < 1:
        return 0

    root = math.isqrt(c)
    remainder = c - root * root
    divisor = root * 20
    total = 0

    for _ in range(_DIGITS):
        remainder *= 100
        digit, modulo = divmod(remainder, divisor)
        square = digit * digit
        remainder = modulo - square
        if square > modulo:
            digit -= 1
            remainder += divisor + 2 * digit + 1
        total += digit
        divisor = divisor * 10 + digit * 20

    return total