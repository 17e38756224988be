"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write the single character ``c``."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(c)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; a missing text writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; a missing text writes nothing."""
    if text is None:
        return
    out = _target(stream)
    out.write(text)
    out.write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal representation of ``n``."""
    _target(stream).write(str(int(n)))