"""Character class tests and case mapping for ASCII codes.

Each function takes a one-character string or an integer code.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    return ord(c) if isinstance(c, str) else c


def is_alpha(c: Char) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: Char) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= _code(c) <= 126


def _shift(c: Char, low: str, high: str, delta: int) -> Char:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    return _shift(c, "a", "z", -32)


def to_lower(c: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    return _shift(c, "A", "Z", 32)