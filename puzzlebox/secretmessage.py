"""Recover a secret word from a string of letters and underscores."""

from __future__ import annotations

from collections import Counter
from string import ascii_lowercase


def decode(encoded: str) -> str:
    """Return the letters at least as frequent as ``_``, most frequent first.

    Only lower-case ASCII letters and ``_`` may appear in ``encoded``.
    """
    counts = Counter(encoded)
    unexpected = set(counts) - set(ascii_lowercase) - {"_"}
    if unexpected:
        raise ValueError(f"unexpected character {min(unexpected)!r}")
    threshold = counts["_"]
    letters = [ch for ch in ascii_lowercase if counts[ch] >= threshold]
    letters.sort(key=lambda ch: counts[ch], reverse=True)
    return "".join(letters)