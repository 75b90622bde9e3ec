"""Writing characters, strings and numbers to a file descriptor."""

from __future__ import annotations

import os
from typing import Optional, Union


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: Union[str, int], fd: int) -> None:
    """Write one character, or one byte given as an integer, to ``fd``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        data = c.encode("utf-8")
    else:
        data = bytes([int(c) & 0xFF])
    _write_all(fd, data)


def put_str_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd``; nothing is written for None."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8"))


def put_endl_fd(s: str, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    if s is None:
        raise TypeError("a string is required")
    _write_all(fd, s.encode("utf-8") + b"\n")


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to ``fd``."""
    _write_all(fd, str(int(n)).encode("ascii"))