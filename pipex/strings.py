"""String helpers with C-string semantics expressed through Python values.

Positions are returned as indices (or None where nothing is found). A NUL
character inside a string ends it, as a terminator would.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple, Union

from .chars import is_digit

CharLike = Union[int, str]

INT_MIN = -2147483648
INT_MAX = 2147483647
_SPACES = "\t\n\v\f\r "


def _terminated(s: str) -> str:
    """Return s cut at its first NUL character."""
    return s.split("\0", 1)[0]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c % 256)


def _require(*values) -> None:
    if any(value is None for value in values):
        raise ValueError("argument must not be None")


def strlen(s: str) -> int:
    """Number of characters before the terminating NUL (or the end)."""
    return len(_terminated(s))


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most size - 1 characters of src.

    Returns the copied text and the full length of src, so truncation
    happened whenever the length is not smaller than size.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    src = _terminated(src)
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dest so the result fits a buffer of size characters.

    Returns the new text and the length the full concatenation would have.
    When dest already fills the buffer it is returned unchanged together
    with size + len(src).
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    dest = _terminated(dest)
    src = _terminated(src)
    dlen, slen = len(dest), len(src)
    if dlen >= size:
        return dest, size + slen
    if slen < size - dlen:
        return dest + src, dlen + slen
    return dest + src[: size - dlen - 1], dlen + slen


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c, or None.

    Searching for NUL finds the terminator, at index strlen(s).
    """
    ch = _char(c)
    s = _terminated(s)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index == -1 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c, or None.

    Searching for NUL finds the terminator, at index strlen(s).
    """
    ch = _char(c)
    s = _terminated(s)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index == -1 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the difference of the first unequal pair."""
    if n < 0:
        raise ValueError(f"count must not be negative: {n}")
    s1 = _terminated(s1)
    s2 = _terminated(s2)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Index of little inside the first n characters of big, or None.

    An empty needle is found at index 0.
    """
    if n < 0:
        raise ValueError(f"length must not be negative: {n}")
    little = _terminated(little)
    if not little:
        return 0
    index = _terminated(big)[:n].find(little)
    return None if index == -1 else index


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign."""
    text = _terminated(text)
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not is_digit(ch):
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start; empty past the end."""
    _require(s)
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    s = _terminated(s)
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    _require(s1, s2)
    return _terminated(s1) + _terminated(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character found in charset."""
    _require(s, charset)
    return _terminated(s).strip(_terminated(charset))


def split_words(text: Optional[str], sep: CharLike) -> List[str]:
    """Split text on sep, dropping the empty pieces between repeated separators."""
    if text is None:
        return []
    ch = _char(sep)
    text = _terminated(text)
    if ch == "\0":
        return [text] if text else []
    return [word for word in text.split(ch) if word]


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit a 32-bit signed integer")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, char) for every character of s."""
    _require(s, f)
    return "".join(_char(f(i, ch)) for i, ch in enumerate(_terminated(s)))


def striteri(s: str, f: Callable[[int, str], Optional[str]]) -> str:
    """Visit every character with f(index, char).

    A character is replaced by what f returns, or kept when f returns None.
    The resulting string is returned.
    """
    _require(s, f)
    result = []
    for i, ch in enumerate(_terminated(s)):
        replacement = f(i, ch)
        result.append(ch if replacement is None else _char(replacement))
    return "".join(result)