import pytest

from fractol.libft.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)

WORD = "fractal"


def test_strlen():
    assert strlen("") == 0
    assert strlen(WORD) == len(WORD)


def test_strlcpy_fits():
    copied, total = strlcpy(WORD, len(WORD) + 1)
    assert copied == WORD
    assert total == len(WORD)


def test_strlcpy_truncates():
    copied, total = strlcpy(WORD, 4)
    assert copied == WORD[:3]
    assert total == len(WORD)
    assert total >= 4


def test_strlcpy_zero_size():
    assert strlcpy(WORD, 0) == ("", len(WORD))


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy(WORD, -1)


def test_strlcat_fits():
    dst, src = "mandel", "brot"
    result, total = strlcat(dst, src, 64)
    assert result == dst + src
    assert total == len(dst) + len(src)


def test_strlcat_truncates():
    dst, src = "mandel", "brot"
    result, total = strlcat(dst, src, len(dst) + 3)
    assert result == dst + src[:2]
    assert total == len(dst) + len(src)


def test_strlcat_full_buffer():
    dst, src = "mandel", "brot"
    assert strlcat(dst, src, len(dst)) == (dst, len(dst) + len(src))
    assert strlcat(dst, src, 0) == (dst, len(src))


def test_strchr():
    assert strchr(WORD, "a") == WORD.index("a")
    assert strchr(WORD, ord("c")) == WORD.index("c")
    assert strchr(WORD, "z") is None
    assert strchr(WORD, "\0") == len(WORD)
    assert strchr(WORD, 0) == len(WORD)


def test_strchr_bad_char():
    with pytest.raises(ValueError):
        strchr(WORD, "ab")


def test_strrchr():
    assert strrchr(WORD, "a") == WORD.rindex("a")
    assert strrchr(WORD, "z") is None
    assert strrchr(WORD, "\0") == len(WORD)


def test_strncmp():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0
    assert strncmp("abc", "ab", 3) == ord("c")
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("abc", "abc", 10) == 0


def test_strncmp_negative():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr():
    big = "lorem ipsum dolor"
    little = "ipsum"
    end = big.index(little) + len(little)
    assert strnstr(big, little, len(big)) == big.index(little)
    assert strnstr(big, little, end) == big.index(little)
    assert strnstr(big, little, end - 1) is None
    assert strnstr(big, "", 0) == 0
    assert strnstr(big, "absent", len(big)) is None


def test_strdup():
    copy = strdup(WORD)
    assert copy == WORD
    with pytest.raises(TypeError):
        strdup(None)


def test_substr():
    s = "0123456789"
    assert substr(s, 2, 3) == s[2:5]
    assert substr(s, 7, 100) == s[7:]
    assert substr(s, len(s), 3) == ""
    assert substr(s, 0, 0) == ""
    with pytest.raises(ValueError):
        substr(s, -1, 2)


def test_strjoin():
    a, b = "julia", "set"
    joined = strjoin(a, b)
    assert joined.startswith(a)
    assert joined.endswith(b)
    assert len(joined) == len(a) + len(b)
    with pytest.raises(TypeError):
        strjoin(a, None)


def test_strtrim():
    core = "a b"
    assert strtrim("xy" + core + "yx", "xy") == core
    assert strtrim(core, "") == core
    assert strtrim("xyxy", "xy") == ""
    with pytest.raises(TypeError):
        strtrim(None, "x")


def test_split():
    words = ["alpha", "beta", "gamma"]
    s = "  " + "   ".join(words) + " "
    assert split(s, " ") == words
    assert split("", " ") == []
    assert split("    ", " ") == []
    assert split(WORD, " ") == [WORD]
    assert split(WORD, "\0") == [WORD]


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split(WORD, "ab")


def test_strmapi():
    seen = []

    def upper(i, ch):
        seen.append(i)
        return ch.upper()

    assert strmapi(WORD, upper) == WORD.upper()
    assert seen == list(range(len(WORD)))


def test_striteri():
    chars = list(WORD)
    seen = []

    def upper(i, ch):
        seen.append(i)
        return ch.upper()

    assert striteri(chars, upper) is None
    assert "".join(chars) == WORD.upper()
    assert seen == list(range(len(WORD)))