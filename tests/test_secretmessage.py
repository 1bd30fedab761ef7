import random
from collections import Counter
from string import ascii_lowercase

import pytest

from puzzlebox.secretmessage import decode


def _encode(word, underscores):
    chars = []
    for rank, ch in enumerate(reversed(word)):
        chars.extend(ch * (underscores + 1 + rank))
    chars.extend("_" * underscores)
    random.Random(7).shuffle(chars)
    return "".join(chars)


def test_recovers_word():
    word = "world"
    assert decode(_encode(word, 1)) == word


def test_letter_as_frequent_as_underscore_is_kept():
    assert decode("ab_") == "ab"


def test_rarer_letters_are_dropped():
    assert decode("ab__") == ""


def test_without_underscores_every_letter_is_returned():
    result = decode("")
    assert sorted(result) == list(ascii_lowercase)


def test_result_ordered_by_frequency():
    encoded = "zzzzyyyxxw__" + "q" * 5
    result = decode(encoded)
    counts = Counter(encoded)
    frequencies = [counts[ch] for ch in result]
    assert frequencies == sorted(frequencies, reverse=True)
    assert "_" not in result
    assert all(counts[ch] >= counts["_"] for ch in result)


@pytest.mark.parametrize("encoded", ["abC", "a-b", "a b"])
def test_rejects_unexpected_characters(encoded):
    with pytest.raises(ValueError):
        decode(encoded)