import pytest

from cubrender.textutil import find_substring, find_unquoted, split_words


def test_find_substring_locates_first_occurrence():
    text = "one two one two"
    pos = find_substring(text, "two", len(text))
    assert text[pos:pos + 3] == "two"
    assert "two" not in text[:pos + 2]


def test_find_substring_missing_returns_minus_one():
    assert find_substring("abcdef", "xyz", 6) == -1


def test_find_substring_limit_shorter_than_pattern():
    assert find_substring("abcdef", "cd", 1) == -1


def test_find_substring_stops_at_nul():
    assert find_substring("abc\0def", "def", 7) == -1


def test_find_unquoted_skips_quoted_part():
    text = 'a "/*" then /* here'
    assert find_unquoted(text, "/*", len(text)) == text.rindex("/*")


def test_find_unquoted_only_quoted_returns_minus_one():
    text = 'x "// inside" y'
    assert find_unquoted(text, "//", len(text)) == -1


def test_find_unquoted_unquoted_first():
    text = '// first "// second"'
    assert find_unquoted(text, "//", len(text)) == text.index("//")


def test_find_unquoted_limit():
    assert find_unquoted("abc /* x", "/*", 1) == -1


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  a\tb  c ", ["a", "b", "c"]),
        ("16 16 2 1", ["16", "16", "2", "1"]),
        ("", []),
        (" \t ", []),
        ("a\nb", ["a\nb"]),
    ],
)
def test_split_words(text, expected):
    assert split_words(text) == expected