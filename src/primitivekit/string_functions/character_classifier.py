"""Predicates that classify the characters of a string.

Every predicate returns False for None, for non-string input and for the
empty string; there is no vacuously true result. Character classes follow
Python's Unicode-aware str methods, so "Привет" is alphabetic but not
ASCII.
"""
from typing import Any

from .primitive_parser import _parse_decimal_or_none

__all__ = [
    "is_all_numeric",
    "is_ascii",
    "is_utf8",
    "is_utf16",
    "is_decimal_number",
    "is_identifier",
    "is_lower",
    "is_upper",
    "is_alpha",
]


def _is_nonempty_text(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def _round_trips(value: str, encoding: str) -> bool:
    """Check that value survives an encode/decode cycle unchanged.

    Unencodable characters (such as unpaired surrogates) are replaced
    during encoding, which makes the comparison fail.
    """
    encoded = value.encode(encoding, errors="replace")
    return encoded.decode(encoding, errors="replace") == value


def is_all_numeric(value: str) -> bool:
    """Return True if value is non-empty and every character is a digit."""
    return _is_nonempty_text(value) and all(ch.isdecimal() for ch in value)


def is_ascii(value: str) -> bool:
    """Return True if value is non-empty and every code point is <= 127."""
    return _is_nonempty_text(value) and value.isascii()


def is_utf8(value: str) -> bool:
    """Return True if value is non-empty and round-trips through UTF-8."""
    return _is_nonempty_text(value) and _round_trips(value, "utf-8")


def is_utf16(value: str) -> bool:
    """Return True if value is non-empty and round-trips through UTF-16."""
    return _is_nonempty_text(value) and _round_trips(value, "utf-16-le")


def is_decimal_number(value: str) -> bool:
    """Return True if value parses as a decimal number.

    Uses the same comma-then-period reading as to_decimal, so both
    "123.45" and "123,1" qualify.
    """
    return _is_nonempty_text(value) and _parse_decimal_or_none(value) is not None


def is_identifier(value: str) -> bool:
    """Return True if value is a letter-or-underscore-led identifier.

    The first character must be a letter or an underscore; every following
    character must be a letter, a digit or an underscore. Letters and
    digits may come from any script.

    Args:
        value: Candidate identifier.

    Returns:
        True if value is a valid identifier, False otherwise.
    """
    if not _is_nonempty_text(value):
        return False
    first, rest = value[0], value[1:]
    if not (first.isalpha() or first == "_"):
        return False
    return all(ch.isalpha() or ch.isdecimal() or ch == "_" for ch in rest)


def is_lower(value: str) -> bool:
    """Return True if value is non-empty and every character is lowercase."""
    return _is_nonempty_text(value) and all(ch.islower() for ch in value)


def is_upper(value: str) -> bool:
    """Return True if value is non-empty and every character is uppercase."""
    return _is_nonempty_text(value) and all(ch.isupper() for ch in value)


def is_alpha(value: str) -> bool:
    """Return True if value is non-empty and every character is a letter."""
    return _is_nonempty_text(value) and value.isalpha()
