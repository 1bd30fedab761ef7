"""Find anagrams of a phrase in a dictionary of phrases."""

from __future__ import annotations

from collections.abc import Iterable


def normalize(s: str) -> str:
    """Return the lower-case ASCII letters of ``s`` in sorted order."""
    letters = (ch.lower() for ch in s)
    return "".join(sorted(ch for ch in letters if "a" <= ch <= "z"))


def find_anagrams(dictionary: Iterable[str], word: str) -> list[str]:
    """Return the entries of ``dictionary`` that are anagrams of ``word``.

    Letters are compared case-insensitively and everything that is not a
    letter is ignored. The word itself, in any case, is not an anagram.
    """
    key = normalize(word)
    if not key:
        return []
    folded = word.casefold()
    return [
        entry
        for entry in dictionary
        if normalize(entry) == key and entry.casefold() != folded
    ]