"""Jaro similarity of two words."""

from __future__ import annotations


def distance(word1: str, word2: str) -> float:
    """Return the Jaro similarity of two words, ignoring case.

    Two empty words score 1; an empty word against a non-empty one scores 0.
    """
    w1, w2 = word1.lower(), word2.lower()
    if not w1 and not w2:
        return 1.0
    if not w1 or not w2:
        return 0.0
    if w1 == w2:
        return 1.0

    l1, l2 = len(w1), len(w2)
    window = max(l1, l2) // 2
    if window > 0:
        window -= 1

    matched1 = [False] * l1
    matched2 = [False] * l2
    matches = 0
    for i, ch in enumerate(w1):
        start, end = i - window, i + window + 1
        if start >= l2:
            break
        for j in range(max(start, 0), min(end, l2)):
            if not matched2[j] and w2[j] == ch:
                matched1[i] = matched2[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    chars1 = (ch for ch, hit in zip(w1, matched1) if hit)
    chars2 = (ch for ch, hit in zip(w2, matched2) if hit)
    transpositions = sum(a != b for a, b in zip(chars1, chars2))

    m = matches
    numerator = (l1 + l2) * m * m + l1 * l2 * (m - transpositions // 2)
    return numerator / (3 * l1 * l2 * m)