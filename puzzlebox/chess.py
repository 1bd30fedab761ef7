"""Knight attack checks on a chess board."""

from __future__ import annotations


class InvalidSquareError(ValueError):
    """Raised when a square is not a valid board square."""

    def __init__(self) -> None:
        super().__init__("invalid square")


def _coordinates(square: str) -> tuple[int, int]:
    file = ord(square[0]) - ord("a") + 1
    rank = ord(square[1]) - ord("1") + 1
    if not 1 <= file <= 8 or not 1 <= rank <= 8:
        raise InvalidSquareError()
    return file, rank


def can_knight_attack(white: str, black: str) -> bool:
    """Return whether knights on ``white`` and ``black`` attack each other.

    Squares are written as a file letter ``a``-``h`` and a rank ``1``-``8``.
    Raises :class:`InvalidSquareError` for malformed or identical squares.
    """
    if len(white) != 2 or len(black) != 2:
        raise InvalidSquareError()
    if white == black:
        raise InvalidSquareError()
    white_file, white_rank = _coordinates(white)
    black_file, black_rank = _coordinates(black)
    distance = {abs(white_file - black_file), abs(white_rank - black_rank)}
    return distance == {1, 2}