"""String utilities: bounded copies, searching, slicing, joining and splitting."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Union

Char = Union[str, int]


def _char(c: Char) -> str:
    """The character ``c`` names: a one-character string or a code taken as a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    return chr(int(c) & 0xFF)


def _non_negative(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"{what} must not be negative")
    return value


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits and the length of ``src``, so truncation
    happened when the second value is at least ``size``.
    """
    _non_negative(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it would have needed; when
    ``dst`` already fills the buffer it is returned unchanged with
    ``size + len(src)``.
    """
    _non_negative(size, "size")
    if size == 0 or len(dst) >= size:
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``; the terminator is found at ``len(s)``."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``; the terminator is found at ``len(s)``."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; the difference of the first mismatch."""
    _non_negative(n, "count")
    for i in range(n):
        x = ord(a[i]) if i < len(a) else 0
        y = ord(b[i]) if i < len(b) else 0
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` within the first ``length`` characters of ``big``."""
    _non_negative(length, "length")
    if not little:
        return 0
    limit = min(length, len(big))
    index = big.find(little, 0, limit)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """A copy of ``s``."""
    if s is None:
        raise TypeError("a string is required")
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(a: str, b: str) -> str:
    """``a`` followed by ``b``."""
    if a is None or b is None:
        raise TypeError("two strings are required")
    return a + b


def strtrim(s: str, charset: str) -> str:
    """``s`` without the characters of ``charset`` at either end."""
    if s is None or charset is None:
        raise TypeError("two strings are required")
    return s.strip(charset) if charset else s


def split(s: str, sep: Char) -> list[str]:
    """The non-empty pieces of ``s`` between occurrences of ``sep``."""
    if s is None:
        raise TypeError("a string is required")
    ch = _char(sep)
    if ch == "\0":
        return [s] if s else []
    return [word for word in s.split(ch) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string of ``func(index, char)`` for each character of ``s``."""
    if s is None:
        raise TypeError("a string is required")
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character in place with ``func(index, char)``."""
    for i, ch in enumerate(chars):
        chars[i] = func(i, ch)