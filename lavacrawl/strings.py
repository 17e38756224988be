"""String helpers: number conversion, splitting, trimming and searching."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional

_SPACES = frozenset(" \t\n\v\f\r")


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading blanks (space and ``\\t`` to ``\\r``) are skipped, one ``+`` or
    ``-`` is allowed, and parsing stops at the first non-digit. Text with
    no digits gives ``0``.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _SPACES:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < length and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if sep == "":
        return [text] if text else []
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: Optional[str]) -> str:
    """Remove every character of ``charset`` from both ends of ``text``.

    With no ``charset`` the text comes back unchanged.
    """
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start`` on.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    Returns the index of the first match, ``0`` for an empty needle, or
    ``None`` when there is no match.
    """
    if needle == "":
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = haystack.find(needle, 0, length)
    return None if index == -1 else index


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(buffer: MutableSequence, func: Callable[[int, object], object]) -> None:
    """Replace each item of ``buffer`` in place with ``func(index, item)``."""
    for index, item in enumerate(buffer):
        buffer[index] = func(index, item)