"""Generate every short string over an alphabet."""

from __future__ import annotations


def generate_short_hashes(dictionary: str, length: int) -> list[str]:
    """Return every string of 1 to ``length`` characters drawn from ``dictionary``."""
    if length < 0:
        raise ValueError("length must not be negative")
    if length == 0:
        return []
    shorter = generate_short_hashes(dictionary, length - 1)
    result: list[str] = []
    for ch in dictionary:
        result.append(ch)
        result.extend(ch + tail for tail in shorter)
    return result