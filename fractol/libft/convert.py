"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_SPACES = " \t\n\v\f\r"


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def atoi(text: str) -> int:
    """Leading decimal integer of ``text``, 0 when there is none.

    Leading whitespace and one sign are accepted; reading stops at the first
    non-digit. The result wraps as a 32-bit signed integer.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    n = int(n)
    if not _INT32_MIN <= n <= _INT32_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)