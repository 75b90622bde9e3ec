import pytest

from fractol.printf import format_hex, format_pointer, printf, sprintf


def test_format_hex_cases():
    assert format_hex(255, False) == "ff"
    assert format_hex(255, True) == "FF"
    assert format_hex(0, False) == "0"


def test_format_hex_wraps_to_32_bits():
    assert int(format_hex(-1, False), 16) == 2**32 - 1


@pytest.mark.parametrize("value", [0, 1, 15, 16, 4095, 123456789, 2**32 - 1])
def test_format_hex_round_trip(value):
    assert int(format_hex(value, False), 16) == value
    assert format_hex(value, True) == format_hex(value, False).upper()


def test_format_pointer_null():
    assert format_pointer(None) == "(nil)"
    assert format_pointer(0) == "(nil)"


def test_format_pointer_address():
    assert format_pointer(4096) == "0x1000"
    assert int(format_pointer(0xDEADBEEF)[2:], 16) == 0xDEADBEEF


def test_sprintf_plain_text():
    assert sprintf("hello world") == "hello world"


def test_sprintf_strings_and_null():
    assert sprintf("[%s]", "abc") == "[abc]"
    assert sprintf("%s", None) == "(null)"


def test_sprintf_char():
    assert sprintf("%c%c", "z", ord("q")) == "zq"


def test_sprintf_signed_integers():
    assert sprintf("%d and %i", -42, 7) == "-42 and 7"
    assert int(sprintf("%d", 2**31)) == -(2**31)


def test_sprintf_unsigned_wraps():
    assert int(sprintf("%u", -1)) == 2**32 - 1


def test_sprintf_hex_and_pointer():
    assert sprintf("%x %X", 3054, 3054) == f"{format_hex(3054, False)} {format_hex(3054, True)}"
    assert sprintf("%p", None) == "(nil)"


def test_sprintf_percent():
    assert sprintf("100%%") == "100%"


def test_sprintf_unknown_conversion_prints_nothing():
    assert sprintf("a%qb") == "ab"


def test_sprintf_trailing_percent_is_dropped():
    assert sprintf("abc%") == "abc"


def test_sprintf_missing_argument():
    with pytest.raises(ValueError):
        sprintf("%d")


def test_printf_writes_and_counts(capsys):
    count = printf("x=%d %s\n", 5, "ok")
    out = capsys.readouterr().out
    assert out == "x=5 ok\n"
    assert count == len(out)


def test_printf_counts_bytes(capsys):
    count = printf("%s", "é")
    out = capsys.readouterr().out
    assert out == "é"
    assert count == len("é".encode("utf-8"))