"""Byte-buffer operations: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]

SIZE_MAX = (1 << 64) - 1


def _check_length(length: int, available: int, what: str) -> None:
    if length < 0:
        raise ValueError(f"{what} length must not be negative")
    if length > available:
        raise IndexError(f"{what} length {length} exceeds buffer size {available}")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to ``value`` (taken as a byte)."""
    _check_length(length, len(buffer), "fill")
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    return memset(buffer, 0, length)


def memcpy(dest: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_length(n, len(src), "source")
    _check_length(n, len(dest), "destination")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer``, correct even when the ranges overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n, len(buffer) - src_offset, "source")
    _check_length(n, len(buffer) - dest_offset, "destination")
    buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memchr(data: Bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``n``, or None."""
    _check_length(n, len(data), "search")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: Bytes, b: Bytes, n: int) -> int:
    """Difference of the first differing bytes among the first ``n``; 0 if equal."""
    _check_length(n, len(a), "first")
    _check_length(n, len(b), "second")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count`` elements of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise OverflowError("requested size does not fit in size_t")
    return bytearray(count * size)