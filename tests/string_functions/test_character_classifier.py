"""Tests for character-class predicates."""
import pytest

from primitivekit import (
    is_all_numeric,
    is_alpha,
    is_ascii,
    is_decimal_number,
    is_identifier,
    is_lower,
    is_upper,
    is_utf16,
    is_utf8,
)

ALL_PREDICATES = [
    is_all_numeric,
    is_alpha,
    is_ascii,
    is_decimal_number,
    is_identifier,
    is_lower,
    is_upper,
    is_utf16,
    is_utf8,
]


@pytest.mark.parametrize("predicate", ALL_PREDICATES)
@pytest.mark.parametrize("value", [None, "", 123, b"abc"])
def test_predicates_reject_missing_empty_and_non_string(predicate, value):
    """Verify no predicate is vacuously true."""
    assert predicate(value) is False


@pytest.mark.parametrize(
    "value, expected",
    [("12345", True), ("12345abc", False), ("12.5", False), ("١٢٣", True)],
)
def test_is_all_numeric(value, expected):
    """Verify only strings made entirely of digits qualify."""
    assert is_all_numeric(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("Hello, world!", True), ("Привет, мир!", False), ("\x7f", True), ("café", False)],
)
def test_is_ascii(value, expected):
    """Verify code points above 127 disqualify a string."""
    assert is_ascii(value) is expected


@pytest.mark.parametrize("value", ["Hello, world!", "Привет, мир!", "日本語", "🙂"])
def test_is_utf8_accepts_well_formed_text(value):
    """Verify well-formed text round-trips through UTF-8."""
    assert is_utf8(value) is True


@pytest.mark.parametrize("value", ["Hello, world!", "Привет, мир!", "🙂"])
def test_is_utf16_accepts_well_formed_text(value):
    """Verify well-formed text round-trips through UTF-16."""
    assert is_utf16(value) is True


@pytest.mark.parametrize("value", ["\ud800", "abc\udc00"])
def test_encoding_predicates_reject_unpaired_surrogates(value):
    """Verify text that cannot be encoded fails the round trip."""
    assert is_utf8(value) is False
    assert is_utf16(value) is False


@pytest.mark.parametrize(
    "value, expected",
    [
        ("123.45", True),
        ("abc", False),
        ("123,1", True),
        ("-7", True),
        ("1,234.5", True),
        ("1.2.3", False),
        ("1e40", False),
    ],
)
def test_is_decimal_number(value, expected):
    """Verify values readable with a comma or a period separator qualify."""
    assert is_decimal_number(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("false", True),
        ("Something_long1", True),
        ("_private", True),
        ("имя2", True),
        ("1_test", False),
        ("has space", False),
        ("dash-name", False),
    ],
)
def test_is_identifier(value, expected):
    """Verify identifiers start with a letter or underscore."""
    assert is_identifier(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("abcdef", True), ("ABCDEF", False), ("abc1", False), ("привет", True)],
)
def test_is_lower(value, expected):
    """Verify every character must be a lowercase letter."""
    assert is_lower(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("abcdef", False), ("ABCDEF", True), ("ABC DEF", False)],
)
def test_is_upper(value, expected):
    """Verify every character must be an uppercase letter."""
    assert is_upper(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("abcdef", True), ("MNOPQ", True), ("cdf2agt", False), ("Привет", True)],
)
def test_is_alpha(value, expected):
    """Verify every character must be a letter."""
    assert is_alpha(value) is expected
