import pytest

from pipex.strings import (
    atoi,
    itoa,
    split_words,
    strchr,
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


@pytest.mark.parametrize("s", ["", "a", "hello world", "PATH=/usr/bin"])
def test_strlen_matches_length(s):
    assert strlen(s) == len(s)


def test_strlen_stops_at_nul():
    assert strlen("abc\0def") == strlen("abc")


def test_strlcpy_full_copy():
    copied, total = strlcpy("hello", 10)
    assert copied == "hello"
    assert total == len("hello")


def test_strlcpy_truncates_to_size_minus_one():
    copied, total = strlcpy("hello", 3)
    assert len(copied) == 2
    assert "hello".startswith(copied)
    assert total == len("hello")


def test_strlcpy_zero_size_copies_nothing():
    copied, total = strlcpy("hello", 0)
    assert copied == ""
    assert total == len("hello")


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("x", -1)


def test_strlcat_fits():
    result, total = strlcat("foo", "bar", 20)
    assert result == "foo" + "bar"
    assert total == len("foobar")


def test_strlcat_truncates():
    result, total = strlcat("foo", "bar", 5)
    assert len(result) == 4
    assert result.startswith("foo")
    assert total == len("foo") + len("bar")


def test_strlcat_dest_already_full():
    result, total = strlcat("foobar", "xy", 3)
    assert result == "foobar"
    assert total == 3 + len("xy")


def test_strchr_finds_first():
    s = "a/b/c"
    index = strchr(s, "/")
    assert s[index] == "/"
    assert "/" not in s[:index]


def test_strchr_accepts_int():
    assert strchr("abc", ord("b")) == strchr("abc", "b")


def test_strchr_missing():
    assert strchr("abc", "z") is None


def test_strchr_nul_finds_terminator():
    assert strchr("abc", "\0") == len("abc")


def test_strrchr_finds_last():
    s = "a/b/c"
    index = strrchr(s, "/")
    assert s[index] == "/"
    assert "/" not in s[index + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr("abc", "z") is None
    assert strrchr("abc", 0) == len("abc")


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_orders():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_zero_count():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("abc", "abc", 10) == 0


def test_strncmp_antisymmetric():
    assert strncmp("PATH=", "HOME=", 5) == -strncmp("HOME=", "PATH=", 5)


def test_strnstr_finds_path_prefix():
    assert strnstr("PATH=/usr/bin", "PATH=", 5) == 0


def test_strnstr_beyond_limit():
    assert strnstr("xxPATH=", "PATH=", 5) is None


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_index_points_to_needle():
    big = "one two three"
    index = strnstr(big, "two", len(big))
    assert big[index:index + len("two")] == "two"


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648])
def test_atoi_round_trip(n):
    assert atoi(str(n)) == n


def test_atoi_whitespace_and_sign():
    assert atoi(" \t\n+42") == atoi("42")
    assert atoi("  -42abc") == -atoi("42")


def test_atoi_no_digits():
    assert atoi("abc") == 0
    assert atoi("--5") == 0


def test_substr_slice():
    assert substr("hello", 1, 3) == "hello"[1:4]


def test_substr_past_end():
    assert substr("hello", 10, 3) == ""


def test_substr_length_clamped():
    assert substr("hello", 2, 100) == "llo"


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin_concatenates():
    assert strjoin("/usr/bin", "/") == "/usr/bin/"


def test_strjoin_none():
    with pytest.raises(ValueError):
        strjoin(None, "x")


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_everything():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  a  ", "") == "  a  "


def test_strtrim_none():
    with pytest.raises(ValueError):
        strtrim("a", None)


def test_split_words_drops_empty_pieces():
    assert split_words("  ls   -l  ", " ") == ["ls", "-l"]


def test_split_words_path():
    assert split_words("/usr/bin:/bin", ":") == ["/usr/bin", "/bin"]


def test_split_words_none_and_blank():
    assert split_words(None, " ") == []
    assert split_words("    ", " ") == []


def test_split_words_rejoin_invariant():
    text = "grep   -v  foo"
    words = split_words(text, " ")
    assert all(" " not in w and w for w in words)
    assert "".join(words) == text.replace(" ", "")


@pytest.mark.parametrize("n", [0, 5, -5, 123456, 2147483647])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)


def test_strmapi_uses_index():
    result = strmapi("abcd", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbCd"


def test_strmapi_preserves_length():
    s = "pipex"
    assert len(strmapi(s, lambda i, c: "*")) == len(s)


def test_strmapi_none():
    with pytest.raises(ValueError):
        strmapi(None, lambda i, c: c)


def test_striteri_visits_in_order():
    seen = []
    result = striteri("abc", lambda i, c: seen.append((i, c)))
    assert seen == [(0, "a"), (1, "b"), (2, "c")]
    assert result == "abc"


def test_striteri_replaces():
    assert striteri("abc", lambda i, c: "z" if c == "b" else None) == "azc"