"""A small printf supporting the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional

from .strings import itoa

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int32(value: Any) -> int:
    value = int(value) & _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _as_uint32(value: Any) -> int:
    return int(value) & _UINT_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Optional[str]) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    return f"0x{int(value) & _POINTER_MASK:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    def take() -> Any:
        try:
            return next(args)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None

    if spec == "c":
        return _char(take())
    if spec == "s":
        return _string(take())
    if spec == "p":
        return _pointer(take())
    if spec in ("d", "i"):
        return itoa(_as_int32(take()))
    if spec == "u":
        return str(_as_uint32(take()))
    if spec == "x":
        return f"{_as_uint32(take()):x}"
    if spec == "X":
        return f"{_as_uint32(take()):X}"
    if spec == "%":
        return "%"
    # An unknown conversion produces nothing and consumes no argument.
    return ""


def format_printf(fmt: str, *args: Any) -> str:
    """Render fmt with args the way printf would write it."""
    pending = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, pending))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered text to standard output; return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)