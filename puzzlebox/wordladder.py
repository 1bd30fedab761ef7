"""Shortest word ladder between two words."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _one_letter_apart(a: str, b: str) -> bool:
    return len(a) == len(b) and sum(x != y for x, y in zip(a, b)) == 1


def word_ladder(from_word: str, to_word: str, dictionary: Iterable[str]) -> int:
    """Return the number of words in the shortest ladder from ``from_word`` to ``to_word``.

    Each step changes one letter and must be a dictionary word; both ends
    count. Returns 0 when no ladder exists.
    """
    words = list(dictionary)
    for word in (from_word, to_word):
        if word not in words:
            words.append(word)
    source = words.index(from_word)
    target = words.index(to_word)

    neighbours: dict[int, list[int]] = {index: [] for index in range(len(words))}
    for i, first in enumerate(words):
        for j in range(i + 1, len(words)):
            if _one_letter_apart(first, words[j]):
                neighbours[i].append(j)
                neighbours[j].append(i)

    seen = {source}
    queue = deque([(source, 1)])
    while queue:
        index, length = queue.popleft()
        if index == target:
            return length
        for nxt in neighbours[index]:
            if nxt not in seen:
                seen.add(nxt)
                queue.append((nxt, length + 1))
    return 0