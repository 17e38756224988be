import pytest

from lavacrawl.strings import (
    atoi,
    itoa,
    split,
    strjoin,
    strmapi,
    striteri,
    strnstr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("n", [0, 7, -7, 42, -2147483648, 2147483647, 1000])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_minimum_int():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_blanks():
    assert atoi(" \t\n\v\f\r123") == atoi("123") == 123


def test_atoi_signs():
    assert atoi("-7") == -atoi("7")
    assert atoi("+7") == atoi("7")


def test_atoi_stops_at_non_digit():
    assert atoi("12abc34") == atoi("12")


@pytest.mark.parametrize("text", ["abc", "--5", "+-5", "", "   ", "- 5"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_split_drops_empty_pieces():
    assert split(",,a,,bc,", ",") == ["a", "bc"]


@pytest.mark.parametrize("text", ["", ",,,"])
def test_split_nothing_left(text):
    assert split(text, ",") == []


@pytest.mark.parametrize("text", ["  hello  world ", "one", " a b  c "])
def test_split_invariants(text):
    words = split(text, " ")
    assert all(word and " " not in word for word in words)
    assert "".join(words) == text.replace(" ", "")


def test_split_empty_separator_keeps_text():
    assert split("abc", "") == ["abc"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a::b", "::")


def test_strtrim_example():
    assert strtrim("wwwwxxHello, World!xxwwwxwx", "xw") == "Hello, World!"


def test_strtrim_everything_trimmed():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_without_charset():
    assert strtrim("  keep  ", None) == "  keep  "


def test_substr_example():
    assert substr("ashwaganda", 4, 3) == "aga"


def test_substr_start_past_end():
    assert substr("abc", 3, 2) == ""
    assert substr("abc", 10, 2) == ""


def test_substr_length_clipped():
    assert substr("abcdef", 2, 100) == "cdef"


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strnstr_finds_match():
    haystack = "lorem ipsum dolor"
    index = strnstr(haystack, "ipsum", len(haystack))
    assert haystack[index:].startswith("ipsum")
    assert index == haystack.index("ipsum")


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_match_must_fit_in_length():
    haystack = "lorem ipsum dolor"
    start = haystack.index("ipsum")
    assert strnstr(haystack, "ipsum", start + 4) is None
    assert strnstr(haystack, "ipsum", start + 5) == start


def test_strnstr_no_match():
    assert strnstr("abcdef", "xyz", 6) is None


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "bar") == "bar"


def test_strmapi_applies_function_with_index():
    seen = []

    def upper(index, char):
        seen.append(index)
        return char.upper()

    assert strmapi("hello", upper) == "HELLO"
    assert seen == list(range(len("hello")))


def test_strmapi_empty():
    assert strmapi("", lambda i, c: c * 2) == ""


def test_striteri_in_place():
    buffer = list("abc")
    result = striteri(buffer, lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result is None
    assert buffer == ["A", "b", "C"]


def test_striteri_bytearray():
    buffer = bytearray(b"abc")
    striteri(buffer, lambda i, b: b - 32)
    assert bytes(buffer) == b"ABC"