"""Convert between integers and Roman numerals."""

from __future__ import annotations

_NUMERALS = (
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)


def encode(n: int) -> str:
    """Return the Roman numeral for ``n``; raises :class:`ValueError` if ``n < 1``."""
    if n < 1:
        raise ValueError(f"cannot encode {n} as a roman numeral")
    parts = []
    for roman, value in _NUMERALS:
        times, n = divmod(n, value)
        parts.append(roman * times)
    return "".join(parts)


def decode(s: str) -> int:
    """Return the value of the Roman numeral ``s``; raises :class:`ValueError` if invalid."""
    rest = s
    total = 0
    for roman, value in _NUMERALS:
        while rest.startswith(roman):
            rest = rest[len(roman) :]
            total += value
    if rest or total == 0:
        raise ValueError(f"invalid roman numeral: {s!r}")
    return total