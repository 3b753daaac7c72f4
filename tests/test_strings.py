import pytest

from shellkit.strings import (
    sepjoin,
    split,
    strchr,
    strict_split,
    strjoin,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_drops_empty_words():
    assert split("  ls   -la  ", " ") == ["ls", "-la"]


def test_split_empty_and_only_separators():
    assert split("", ":") == []
    assert split(":::", ":") == []


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strict_split_keeps_empty_pieces():
    assert strict_split("/bin::/usr/bin:", ":") == ["/bin", "", "/usr/bin", ""]


@pytest.mark.parametrize("text", ["", "a", "a:b", "::", "x::y:z:"])
def test_strict_split_round_trip(text):
    pieces = strict_split(text, ":")
    assert ":".join(pieces) == text
    assert len(pieces) == text.count(":") + 1


def test_strict_split_none():
    assert strict_split(None, ":") is None


def test_strjoin_and_sepjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert sepjoin("/usr/bin", "ls", "/") == "/usr/bin/ls"
    assert sepjoin("", "", "=") == "="


def test_sepjoin_rejects_bad_separator():
    with pytest.raises(ValueError):
        sepjoin("a", "b", "")


def test_strchr_and_strrchr():
    text = "a=b=c"
    assert strchr(text, "=") == 1
    assert strrchr(text, "=") == 3
    assert strchr(text, "z") is None
    assert strrchr(text, "z") is None


def test_nul_finds_end():
    assert strchr("abc", "\0") == len("abc")
    assert strrchr("abc", "\0") == len("abc")


def test_strncmp_equal_and_limited():
    assert strncmp("export", "export", 6) == 0
    assert strncmp("exportX", "exportY", 6) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_sign_and_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abc", "ab", 3) > 0
    assert strncmp("ab", "abc", 3) < 0


def test_strncmp_antisymmetric():
    assert strncmp("hello", "help", 5) == -strncmp("help", "hello", 5)


def test_strnstr():
    assert strnstr("minishell", "shell", 9) == 4
    assert strnstr("minishell", "shell", 8) is None
    assert strnstr("minishell", "", 0) == 0
    assert strnstr("abc", "xyz", 3) is None


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strtrim():
    assert strtrim("  \thi there\t ", " \t") == "hi there"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("keep", "") == "keep"


def test_substr():
    assert substr("minishell", 4, 5) == "shell"
    assert substr("minishell", 4, 100) == "shell"
    assert substr("abc", 10, 2) == ""
    assert substr("abc", 3, 2) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strmapi_uses_index():
    result = strmapi("abcd", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbCd"
    assert strmapi("", lambda i, c: c) == ""