import pytest

from puzzlebox.buildword import build_word


@pytest.mark.parametrize(
    "word, fragments, expected",
    [
        ("buildword", ["buil", "dwor", "bu", "ild", "wo", "rd"], 4),
        ("answer", ["wer", "ans"], 2),
        ("aaaaaa", ["a", "aa", "aaa", "aaaa", "aaaaa", "aaaaaa"], 1),
        (
            "veeerrryy ttrrricckkkyy tteessssttt",
            ["tt", "t", "ee", "e", "v", "rr", "rrr", "kkk", "cc", "ssss", "y", "yy", " ", "ii", "i"],
            18,
        ),
        ("sleeps", ["s", "eeps", "sleep"], 2),
        ("sleeps", ["s", "eeps", "slee"], 0),
    ],
)
def test_build_word(word, fragments, expected):
    assert build_word(word, fragments) == expected


def test_no_fragments_cannot_build():
    assert build_word("abc", []) == 0