"""Fewest fragments needed to assemble a word."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _occurrences(word: str, fragment: str):
    """Yield the start of each non-overlapping occurrence, left to right."""
    start = word.find(fragment)
    while start != -1:
        yield start
        start = word.find(fragment, start + len(fragment))


def build_word(word: str, fragments: Iterable[str]) -> int:
    """Return the least number of fragments that concatenate to ``word``.

    Returns 0 when the word cannot be built.
    """
    edges: dict[int, list[int]] = {}
    for fragment in fragments:
        if not fragment:
            continue
        for start in _occurrences(word, fragment):
            edges.setdefault(start, []).append(start + len(fragment))

    target = len(word)
    seen = {0}
    queue = deque([(0, 0)])
    while queue:
        position, steps = queue.popleft()
        if position == target:
            return steps
        for nxt in edges.get(position, ()):
            if nxt not in seen:
                seen.add(nxt)
                queue.append((nxt, steps + 1))
    return 0