import pytest

from puzzlebox.chess import InvalidSquareError, can_knight_attack


@pytest.mark.parametrize(
    "white, black, attack",
    [
        ("f1", "g2", False),
        ("d4", "f4", False),
        ("a8", "b6", True),
        ("b7", "d8", True),
        ("c6", "b8", True),
        ("d1", "f2", True),
        ("e3", "g2", True),
        ("f8", "h7", True),
        ("g1", "h3", True),
        ("h4", "g2", True),
    ],
)
def test_can_knight_attack(white, black, attack):
    assert can_knight_attack(white, black) is attack


@pytest.mark.parametrize(
    "white, black",
    [
        ("b4", "b4"),
        ("a8", "b9"),
        ("a0", "b1"),
        ("g3", "i5"),
        ("not", "valid"),
        ("", ""),
    ],
)
def test_invalid_squares(white, black):
    with pytest.raises(InvalidSquareError):
        can_knight_attack(white, black)


def test_error_is_value_error():
    with pytest.raises(ValueError, match="invalid square"):
        can_knight_attack("z1", "a1")