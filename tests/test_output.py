import os

import pytest

from fractol.libft.output import put_char_fd, put_endl_fd, put_nbr_fd, put_str_fd


class _Pipe:
    """A pipe whose write end is handed to the code under test."""

    def __init__(self):
        self.read_fd, self.write_fd = os.pipe()
        self._write_open = True
        self._read_open = True

    def read(self):
        self._close_write()
        chunks = []
        while True:
            chunk = os.read(self.read_fd, 4096)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    def _close_write(self):
        if self._write_open:
            os.close(self.write_fd)
            self._write_open = False

    def close(self):
        self._close_write()
        if self._read_open:
            os.close(self.read_fd)
            self._read_open = False


@pytest.fixture
def pipe():
    channel = _Pipe()
    yield channel
    channel.close()


def test_put_char_fd_string(pipe):
    put_char_fd("x", pipe.write_fd)
    assert pipe.read() == b"x"


def test_put_char_fd_byte_value(pipe):
    put_char_fd(ord("A"), pipe.write_fd)
    assert pipe.read() == b"A"


def test_put_char_fd_rejects_long_string(pipe):
    with pytest.raises(ValueError):
        put_char_fd("ab", pipe.write_fd)


def test_put_str_fd_writes_text(pipe):
    put_str_fd("hello world", pipe.write_fd)
    assert pipe.read() == b"hello world"


def test_put_str_fd_none_writes_nothing(pipe):
    put_str_fd(None, pipe.write_fd)
    assert pipe.read() == b""


def test_put_endl_fd_appends_newline(pipe):
    put_endl_fd("line", pipe.write_fd)
    put_endl_fd("", pipe.write_fd)
    assert pipe.read() == b"line\n\n"


def test_put_endl_fd_rejects_none(pipe):
    with pytest.raises(TypeError):
        put_endl_fd(None, pipe.write_fd)


@pytest.mark.parametrize("n", [0, 9, 10, -1, 2147483647, -2147483648])
def test_put_nbr_fd_round_trip(pipe, n):
    put_nbr_fd(n, pipe.write_fd)
    assert int(pipe.read()) == n


def test_put_nbr_fd_negative_sign(pipe):
    put_nbr_fd(-2147483648, pipe.write_fd)
    assert pipe.read() == b"-2147483648"