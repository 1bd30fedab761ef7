"""Print a square number spiral."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def element(n: int, x: int, y: int) -> int:
    """Return the number at column ``x`` and line ``y`` of the spiral of size ``n``.

    The spiral counts inwards-out: 0 sits at the centre and ``n*n - 1`` at
    the outermost corner.
    """
    if n < 1:
        raise ValueError("size must be positive")
    if not (0 <= x < n and 0 <= y < n):
        raise ValueError(f"position ({x}, {y}) outside a spiral of size {n}")
    # Peel one edge at a time: an even spiral loses its top line and right
    # column, an odd one its bottom line and left column.
    while True:
        square = n * n
        if n % 2 == 0:
            if y == 0:
                return square - 1 - x
            if x == n - 1:
                return square - n - y
            n, y = n - 1, y - 1
        else:
            if y == n - 1:
                return square - n + x
            if x == 0:
                return square - n - (n - 1) + y
            n, x = n - 1, x - 1


def render(n: int) -> str:
    """Return the spiral of size ``n`` as right-aligned columns, one line per row."""
    width = len(str(n * n - 1))
    lines = (
        "".join(f"{element(n, x, y):>{width}} " for x in range(n)) + "\n"
        for y in range(n)
    )
    return "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a spiral; the size defaults to 10."""
    parser = argparse.ArgumentParser(description="Print a square number spiral.")
    parser.add_argument("size", nargs="?", type=int, default=10)
    args = parser.parse_args(argv)
    if args.size < 1:
        parser.error("size must be positive")
    print(render(args.size), end="")
    return 0