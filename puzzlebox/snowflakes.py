"""Count overlaid triangles in a snowflake figure."""

from __future__ import annotations

_GENERATORS = (
    (6, 6, 0),
    (-1, 1, 1),
)


def overlaid_triangles(n: int, m: int) -> int:
    """Return the number of triangles lying ``m`` levels deep in a figure of size ``n``."""
    if n < 0:
        raise ValueError("size must not be negative")
    if m % 2 == 0:
        return 0
    if not 1 <= m <= n + 1:
        raise ValueError(f"depth {m} out of range for size {n}")

    counts = [0] * (n + 1)
    counts[0] = 1
    for level in range(n - 1):
        following = [0] * (n + 1)
        for j, amount in enumerate(counts[: level + 1]):
            offset = j & ~1
            for i, factor in enumerate(_GENERATORS[j & 1]):
                following[offset + i] += amount * factor
        counts = following
    return counts[m - 1]