import pytest

from lavacrawl.buffers import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
    strchr,
    strlcat,
    strlcpy,
    strncmp,
    strrchr,
)


def _cstring(buffer):
    return bytes(buffer).split(b"\0", 1)[0]


def test_strlcpy_full_copy():
    dst = bytearray(10)
    assert strlcpy(dst, b"hello", len(dst)) == 5
    assert _cstring(dst) == b"hello"


def test_strlcpy_truncates_and_terminates():
    dst = bytearray(b"xxxxxxxx")
    result = strlcpy(dst, b"hello", 3)
    assert result == len(b"hello")
    assert _cstring(dst) == b"hello"[:2]
    assert dst[2] == 0


def test_strlcpy_size_zero_writes_nothing():
    dst = bytearray(b"keep")
    assert strlcpy(dst, b"abc", 0) == 3
    assert dst == bytearray(b"keep")


def test_strlcpy_stops_at_nul_in_source():
    dst = bytearray(8)
    assert strlcpy(dst, b"ab\0cd", 8) == 2
    assert _cstring(dst) == b"ab"


def test_strlcat_appends():
    dst = bytearray(b"foo\0\0\0\0\0\0\0")
    assert strlcat(dst, b"bar", len(dst)) == 6
    assert _cstring(dst) == b"foo" + b"bar"


def test_strlcat_truncates_to_size():
    dst = bytearray(b"foo\0\0\0\0\0")
    result = strlcat(dst, b"barbaz", 5)
    assert result == len(b"foo") + len(b"barbaz")
    assert len(_cstring(dst)) == 4
    assert _cstring(dst).startswith(b"foo")


def test_strlcat_dst_already_fills_size():
    dst = bytearray(b"abcdef\0")
    assert strlcat(dst, b"xyz", 3) == 3 + 3
    assert _cstring(dst) == b"abcdef"


@pytest.mark.parametrize(
    "first, second, n",
    [("abc", "abc", 3), ("abc", "abd", 3), ("abd", "abc", 3), ("ab", "abc", 5), ("abc", "ab", 5)],
)
def test_strncmp_sign_matches_ordering(first, second, n):
    result = strncmp(first, second, n)
    expected = (first > second) - (first < second)
    assert (result > 0) - (result < 0) == expected


def test_strncmp_limits_comparison():
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abcX", "abcY", 4) == ord("X") - ord("Y")


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_bytes_unsigned():
    assert strncmp(b"\xff", b"\x01", 1) == 0xFF - 0x01


def test_strchr_and_strrchr():
    text = "banana"
    assert strchr(text, "a") == text.index("a")
    assert strrchr(text, "a") == text.rindex("a")
    assert strchr(text, "z") is None
    assert strrchr(text, "z") is None


def test_strchr_nul_finds_terminator():
    assert strchr("abc", "\0") == 3
    assert strrchr("abc", 0) == 3


def test_strchr_accepts_int_code():
    assert strchr(b"hello", ord("l")) == 2


def test_memset_sets_prefix():
    buffer = bytearray(b"abcdef")
    result = memset(buffer, ord("x"), 3)
    assert result is buffer
    assert buffer == bytearray(b"xxxdef")


def test_memset_wraps_value():
    buffer = bytearray(2)
    memset(buffer, 256 + 7, 2)
    assert buffer == bytearray([7, 7])


def test_memset_too_long_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buffer = bytearray(b"abcd")
    bzero(buffer, 2)
    assert buffer == bytearray(b"\0\0cd")


def test_memcpy_copies():
    dst = bytearray(5)
    assert memcpy(dst, b"hello", 5) == bytearray(b"hello")


def test_memcpy_partial():
    dst = bytearray(b"-----")
    memcpy(dst, b"abc", 2)
    assert dst == bytearray(b"ab---")


def test_memcpy_source_too_short():
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 3)


def test_memmove_overlap_forward():
    buffer = bytearray(b"abcdef")
    memmove(buffer, 2, 0, 4)
    assert buffer == bytearray(b"ababcd")


def test_memmove_overlap_backward():
    buffer = bytearray(b"abcdef")
    memmove(buffer, 0, 2, 4)
    assert buffer == bytearray(b"cdefef")


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_within_n():
    data = b"hello"
    assert memchr(data, ord("l"), 5) == data.index(b"l")
    assert memchr(data, ord("o"), 4) is None


def test_memcmp_orders_bytes():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_missing_buffers():
    assert memcmp(None, None, 3) == 0
    assert memcmp(None, b"a", 1) == -1
    assert memcmp(b"a", None, 1) == 1


def test_calloc_zeroed():
    buffer = calloc(3, 4)
    assert len(buffer) == 12
    assert not any(buffer)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, -1)