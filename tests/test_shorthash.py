import pytest

from puzzlebox.shorthash import generate_short_hashes


@pytest.mark.parametrize(
    "dictionary, max_len, expected",
    [
        ("ab", 1, ["a", "b"]),
        ("ab", 2, ["a", "b", "aa", "bb", "ab", "ba"]),
        (
            "123",
            3,
            [
                "1", "11", "111", "112", "113", "12", "121", "122", "123", "13",
                "131", "132", "133", "2", "21", "211", "212", "213", "22", "221",
                "222", "223", "23", "231", "232", "233", "3", "31", "311", "312",
                "313", "32", "321", "322", "323", "33", "331", "332", "333",
            ],
        ),
        ("ab", 3, ["a", "b", "aa", "bb", "ab", "ba", "aaa", "baa", "aba", "aab", "bbb", "abb", "bab", "bba"]),
        ("a", 4, ["a", "aa", "aaa", "aaaa"]),
        ("磨宿", 1, ["磨", "宿"]),
        ("", 1, []),
        ("a", 0, []),
    ],
)
def test_generate_short_hashes(dictionary, max_len, expected):
    assert sorted(generate_short_hashes(dictionary, max_len)) == sorted(expected)


def test_no_duplicates():
    result = generate_short_hashes("xyz", 3)
    assert len(result) == len(set(result))


def test_negative_length_raises():
    with pytest.raises(ValueError):
        generate_short_hashes("ab", -1)