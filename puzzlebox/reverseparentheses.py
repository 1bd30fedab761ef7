"""Reverse the text inside each pair of parentheses."""

from __future__ import annotations


def reverse(s: str) -> str:
    """Reverse every parenthesised part of ``s``, innermost first, and drop the brackets.

    An opening bracket that is never closed is dropped and its text kept as
    it is. A closing bracket without an opening one reverses everything
    before it and leaves the rest of the text untouched.
    """
    levels: list[list[str]] = [[]]
    for position, ch in enumerate(s):
        if ch == "(":
            levels.append([])
        elif ch == ")":
            if len(levels) == 1:
                return "".join(reversed(levels[0])) + s[position + 1 :]
            inner = levels.pop()
            inner.reverse()
            levels[-1].extend(inner)
        else:
            levels[-1].append(ch)
    while len(levels) > 1:
        inner = levels.pop()
        levels[-1].extend(inner)
    return "".join(levels[0])