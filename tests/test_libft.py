import pytest

from ftformat.libft import atoi, itoa, split, strncmp, strnstr, strtrim, substr


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_matches_str():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n+123abc") == int("123")
    assert atoi("  -123 4") == -int("123")


def test_atoi_no_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("--5") == 0


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_join_round_trip():
    words = ["a", "bc", "def"]
    assert split(",".join(words), ",") == words


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a--b", "--")


def test_strtrim_both_ends():
    assert strtrim("xxhixyx", "xy") == "hi"
    assert strtrim("xyxy", "xy") == ""
    assert strtrim("  keep  ", "") == "  keep  "


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 10, 3) == ""
    assert substr("hello", 2, 100) == "llo"
    assert substr("(null)", 0, 6) == "(null)"


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strnstr():
    assert strnstr("hello world", "world", 11) == 6
    assert strnstr("hello world", "world", 10) is None
    assert strnstr("hello", "", 0) == 0
    assert strnstr("hello", "xyz", 5) is None


def test_strncmp_equal_and_order():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abcx", "abcy", 3) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("anything", "else", 0) == 0