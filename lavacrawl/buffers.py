"""C-string and raw memory helpers working on ``bytes`` and ``bytearray``.

A C string is a byte sequence whose content ends at its first NUL byte,
or at the end of the sequence if it holds none.
"""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]
Char = Union[str, int]
Text = Union[str, bytes, bytearray]


def _cstr(data: Bytes) -> bytes:
    """Return the content of a C string, up to its first NUL byte."""
    raw = bytes(data)
    end = raw.find(0)
    return raw if end == -1 else raw[:end]


def _code(c: Char) -> int:
    return ord(c) if isinstance(c, str) else c


def _codes(text: Text) -> list[int]:
    return [ord(ch) for ch in text] if isinstance(text, str) else list(text)


def _check_span(name: str, length: int, n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    if n > length:
        raise ValueError(f"{name} holds {length} bytes, {n} requested")


def strlcpy(dst: bytearray, src: Bytes, size: int) -> int:
    """Copy the C string ``src`` into ``dst``, at most ``size - 1`` bytes plus NUL.

    Returns the length of ``src``, so a result of ``size`` or more means the
    copy was cut short. Nothing is written when ``size`` is 0.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    source = _cstr(src)
    if size == 0:
        return len(source)
    copied = source[: size - 1]
    dst[: len(copied) + 1] = copied + b"\0"
    return len(source)


def strlcat(dst: bytearray, src: Bytes, size: int) -> int:
    """Append the C string ``src`` to the C string in ``dst``.

    The result, NUL included, fits in ``size`` bytes. Returns the length
    the full string would have had: ``len(dst) + len(src)``, or
    ``size + len(src)`` when ``dst`` already fills ``size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len = len(_cstr(dst))
    source = _cstr(src)
    if dst_len >= size:
        return size + len(source)
    copied = source[: size - 1 - dst_len]
    dst[dst_len: dst_len + len(copied) + 1] = copied + b"\0"
    return dst_len + len(source)


def strncmp(first: Text, second: Text, n: int) -> int:
    """Compare at most ``n`` characters of two C strings.

    Returns the difference of the first pair of characters that differ,
    or 0 when the compared parts are equal.
    """
    if n <= 0:
        return 0
    a, b = _codes(first), _codes(second)

    def at(codes: list[int], i: int) -> int:
        return codes[i] if i < len(codes) else 0

    i = 0
    while at(a, i) and at(b, i) and at(a, i) == at(b, i) and i < n - 1:
        i += 1
    return at(a, i) - at(b, i)


def strchr(text: Text, c: Char) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``.

    Searching for NUL gives the index of the terminator, ``len(text)``.
    Returns ``None`` when ``c`` does not occur.
    """
    code = _code(c)
    if code == 0:
        return len(text)
    codes = _codes(text)
    return codes.index(code) if code in codes else None


def strrchr(text: Text, c: Char) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``.

    Searching for NUL gives the index of the terminator, ``len(text)``.
    Returns ``None`` when ``c`` does not occur.
    """
    code = _code(c)
    if code == 0:
        return len(text)
    codes = _codes(text)
    for index in reversed(range(len(codes))):
        if codes[index] == code:
            return index
    return None


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_span("buffer", len(buffer), n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def memcpy(dst: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_span("dst", len(dst), n)
    _check_span("src", len(src), n)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` from ``src_offset`` to ``dst_offset``.

    The two regions may overlap; the bytes are read before any is written.
    """
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_span("buffer", len(buffer) - dst_offset, n)
    _check_span("buffer", len(buffer) - src_offset, n)
    buffer[dst_offset: dst_offset + n] = bytes(buffer[src_offset: src_offset + n])
    return buffer


def memchr(data: Bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` among the first ``n``."""
    _check_span("data", len(data), n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index == -1 else index


def memcmp(first: Optional[Bytes], second: Optional[Bytes], n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of bytes that differ, or 0.
    A missing buffer sorts before a present one; two missing ones are equal.
    """
    if first is None and second is None:
        return 0
    if first is None:
        return -1
    if second is None:
        return 1
    _check_span("first", len(first), n)
    _check_span("second", len(second), n)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)