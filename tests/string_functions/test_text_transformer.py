"""Tests for string transformations, counting, JSON conversion and extraction."""
import pytest

from primitivekit import (
    FormatError,
    InvalidArgumentError,
    MalformedInputError,
    NullInputError,
    capitalize,
    count_char,
    count_substring,
    extract_quoted_text,
    reverse,
    to_key_value_json,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("hello", "Hello"),
        ("hello World", "Hello World"),
        ("hELLO", "HELLO"),
        ("élan", "Élan"),
        ("ßa", "ßa"),
        ("ǆemal", "Ǆemal"),
        ("1abc", "1abc"),
        (" lead", " lead"),
        ("", ""),
        (None, None),
    ],
)
def test_capitalize(value, expected):
    """Verify only a leading letter is upper-cased."""
    assert capitalize(value) == expected


def test_capitalize_rejects_non_string():
    """Verify non-string input raises TypeError."""
    with pytest.raises(TypeError):
        capitalize(42)


@pytest.mark.parametrize(
    "value, expected",
    [("abcdef", "fedcba"), ("123456", "654321"), ("", ""), (None, None)],
)
def test_reverse(value, expected):
    """Verify code points come back in reverse order."""
    assert reverse(value) == expected


@pytest.mark.parametrize("value", ["a", "racecar", "héllo wörld", "Привет"])
def test_reverse_twice_restores_original(value):
    """Verify reversing twice is the identity."""
    assert reverse(reverse(value)) == value


@pytest.mark.parametrize(
    "value, char, expected",
    [
        ("hello", "l", 2),
        ("hello", "z", 0),
        ("", "a", 0),
        (None, "a", 0),
        ("abc", "", 0),
        ("abc", None, 0),
        (None, "", 0),
    ],
)
def test_count_char(value, char, expected):
    """Verify single characters are counted, missing text or char counts as zero."""
    assert count_char(value, char) == expected


@pytest.mark.parametrize("char", ["ab", "lo"])
def test_count_char_rejects_multi_character_search(char):
    """Verify a search value longer than one character is rejected."""
    with pytest.raises(InvalidArgumentError):
        count_char("hello", char)


@pytest.mark.parametrize(
    "value, search, expected",
    [
        ("hello world hello", "hello", 2),
        ("aaaa", "aa", 2),
        ("aaa", "aa", 1),
        ("abc", "d", 0),
        ("abc", "", 0),
        ("abc", None, 0),
        ("", "a", 0),
        (None, "a", 0),
    ],
)
def test_count_substring_counts_non_overlapping(value, search, expected):
    """Verify the scan resumes after each match."""
    assert count_substring(value, search) == expected


def test_to_key_value_json_builds_object():
    """Verify pairs become string members in their original order."""
    result = to_key_value_json("name:John Doe|age:30|city:New York")
    assert result == '{"name":"John Doe","age":"30","city":"New York"}'


@pytest.mark.parametrize("value", ["", None])
def test_to_key_value_json_empty_input(value):
    """Verify missing or empty input gives an empty object."""
    assert to_key_value_json(value) == "{}"


def test_to_key_value_json_allows_empty_value():
    """Verify an empty value after the colon is kept."""
    assert to_key_value_json("key:") == '{"key":""}'


def test_to_key_value_json_does_not_escape():
    """Verify keys and values are copied verbatim."""
    assert to_key_value_json('say:"hi"') == '{"say":""hi""}'


@pytest.mark.parametrize("value", ["key", "a:1|b", "a:1|", "a:b:c"])
def test_to_key_value_json_rejects_malformed_pairs(value):
    """Verify a pair without exactly one key and one value is rejected."""
    with pytest.raises(MalformedInputError):
        to_key_value_json(value)


def test_malformed_input_is_a_format_error():
    """Verify MalformedInputError can be caught as FormatError."""
    with pytest.raises(FormatError):
        to_key_value_json("broken")


def test_extract_quoted_text_default_quote():
    """Verify the text inside the first single-quoted section is returned."""
    value = "function(parameter1, 'This is the text to extract')"
    assert extract_quoted_text(value, "'") == "This is the text to extract"
    assert extract_quoted_text(value) == "This is the text to extract"


def test_extract_quoted_text_is_non_greedy():
    """Verify only the first quoted section is returned."""
    assert extract_quoted_text("'first' and 'second'") == "first"


def test_extract_quoted_text_custom_quote():
    """Verify a different quote character can be used."""
    assert extract_quoted_text('call("value")', '"') == "value"


@pytest.mark.parametrize("quote_char", [".", "|", "*"])
def test_extract_quoted_text_matches_quote_literally(quote_char):
    """Verify regex metacharacters are treated as plain quote characters."""
    value = f"a{quote_char}b{quote_char}c"
    assert extract_quoted_text(value, quote_char) == "b"


def test_extract_quoted_text_empty_interior():
    """Verify an empty quoted section yields an empty string."""
    assert extract_quoted_text("x = ''") == ""


@pytest.mark.parametrize(
    "value",
    ["function(parameter1, 'missing closing quote)", "no quotes here", "'a\nb'"],
)
def test_extract_quoted_text_without_quote_pair(value):
    """Verify text without a complete quoted section is rejected."""
    with pytest.raises(InvalidArgumentError):
        extract_quoted_text(value)


def test_extract_quoted_text_rejects_none():
    """Verify None input raises NullInputError."""
    with pytest.raises(NullInputError):
        extract_quoted_text(None)


def test_extract_quoted_text_rejects_empty():
    """Verify empty input raises InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError):
        extract_quoted_text("")


@pytest.mark.parametrize("quote_char", ["", "''", None])
def test_extract_quoted_text_requires_single_quote_char(quote_char):
    """Verify the quote must be exactly one character."""
    with pytest.raises(InvalidArgumentError):
        extract_quoted_text("'x'", quote_char)
