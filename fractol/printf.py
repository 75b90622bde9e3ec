"""A small printf supporting the c, s, d, i, u, x, X, p and % conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_MISSING = object()


def _to_uint32(value: Any) -> int:
    return int(value) & _UINT32_MASK


def _to_int32(value: Any) -> int:
    unsigned = _to_uint32(value)
    return unsigned - (1 << 32) if unsigned >= 1 << 31 else unsigned


def format_hex(value: int, uppercase: bool = False) -> str:
    """Hexadecimal digits of ``value`` taken as a 32-bit unsigned integer."""
    return format(_to_uint32(value), "X" if uppercase else "x")


def format_pointer(address: int | None) -> str:
    """An address as ``0x``-prefixed lowercase hex, or ``(nil)`` for a null one."""
    if not address:
        return "(nil)"
    return "0x" + format(address & _POINTER_MASK, "x")


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c takes a single character")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return ""
    value = next(values, _MISSING)
    if value is _MISSING:
        raise ValueError(f"not enough arguments for %{spec}")
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_to_int32(value))
    if spec == "u":
        return str(_to_uint32(value))
    if spec == "x":
        return format_hex(value, False)
    if spec == "X":
        return format_hex(value, True)
    return format_pointer(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    values = iter(args)
    chars = iter(fmt)
    parts: list[str] = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        parts.append(_convert(spec, values))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the bytes written."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text.encode("utf-8", "surrogateescape"))