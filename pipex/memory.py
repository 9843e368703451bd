"""Byte-buffer helpers operating on bytearray objects."""

from __future__ import annotations

import sys
from typing import Optional

SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with value (truncated to a byte)."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def memcpy(dest: Optional[bytearray], src, n: int) -> Optional[bytearray]:
    """Copy n bytes from src to the start of dest and return dest."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise ValueError("both dest and src are required")
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move n bytes inside buf from offset src to offset dest; overlap is safe."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0 or dest + n > len(buf) or src + n > len(buf):
        raise ValueError("move range lies outside the buffer")
    if n == 0 or dest == src:
        return buf
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c in data[:n], or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index == -1 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first n bytes; return the difference of the first unequal pair."""
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nelem: int, elsize: int) -> bytearray:
    """Return a zeroed buffer of nelem * elsize bytes."""
    if nelem < 0 or elsize < 0:
        raise ValueError("sizes must not be negative")
    if nelem == 0 or elsize == 0:
        return bytearray()
    if elsize > SIZE_MAX // nelem:
        raise OverflowError(f"{nelem} * {elsize} bytes overflows the size limit")
    return bytearray(nelem * elsize)