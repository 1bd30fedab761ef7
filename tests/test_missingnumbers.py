import random

import pytest

from puzzlebox.missingnumbers import missing


@pytest.mark.parametrize(
    "numbers, expected",
    [
        ([4, 2, 3], [1, 5]),
        ([1, 2, 3, 4], [5, 6]),
    ],
)
def test_small_cases(numbers, expected):
    assert missing(numbers) == expected


def test_big_range():
    numbers = [i for i in range(1, 1001) if i not in (100, 900)]
    assert missing(numbers) == [100, 900]


def test_fuzzy():
    rng = random.Random(1234)
    size = 10000
    for _ in range(10):
        numbers = list(range(1, size + 1))
        rng.shuffle(numbers)
        first = numbers.pop(rng.randrange(len(numbers)))
        second = numbers.pop(rng.randrange(len(numbers)))
        assert missing(numbers) == sorted([first, second])


def test_accepts_iterator():
    assert missing(iter([4, 2, 3])) == [1, 5]


def test_impossible_input_raises():
    with pytest.raises(ValueError):
        missing([1, 1, 1])