"""Write characters, strings and numbers to a stream or a file descriptor."""

from __future__ import annotations

import os
from typing import TextIO, Union

from .strings import itoa

Stream = Union[int, TextIO]


def _write(stream: Stream, text: str) -> None:
    if isinstance(stream, int):
        os.write(stream, text.encode("latin-1", errors="replace"))
    else:
        stream.write(text)


def _char(c: Union[int, str]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def put_char(c: Union[int, str], stream: Stream) -> None:
    """Write one character."""
    _write(stream, _char(c))


def put_str(s: str, stream: Stream) -> None:
    """Write a string as it is."""
    if s is None:
        raise TypeError("string must not be None")
    _write(stream, s)


def put_endl(s: str, stream: Stream) -> None:
    """Write a string followed by a newline."""
    put_str(s, stream)
    _write(stream, "\n")


def put_nbr(n: int, stream: Stream) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    _write(stream, itoa(n))