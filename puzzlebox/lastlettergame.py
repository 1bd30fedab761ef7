"""Longest chain of words where each starts with the last letter of the one before."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _successors(words: Sequence[str]) -> list[list[int]]:
    return [
        [
            index
            for index, following in enumerate(words)
            if word and following and word[-1] == following[0] and word != following
        ]
        for word in words
    ]


def sequence(words: Iterable[str]) -> list[str]:
    """Return the longest chain of distinct words from ``words``.

    Among chains of equal length the first one found, exploring words in
    the order given, is returned.
    """
    words = list(words)
    successors = _successors(words)
    visited = [False] * len(words)
    path: list[str] = []
    best: list[str] = []

    def extend(candidates: Iterable[int]) -> None:
        nonlocal best
        for index in candidates:
            if visited[index]:
                continue
            visited[index] = True
            path.append(words[index])
            extend(successors[index])
            if len(path) > len(best):
                best = path.copy()
            path.pop()
            visited[index] = False

    extend(range(len(words)))
    return best