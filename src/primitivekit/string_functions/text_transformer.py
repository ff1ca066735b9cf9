"""String transformations: capitalization, reversal, counting and extraction.

Also converts the compact "key:value|key:value" notation into a flat JSON
object string. That conversion is purely textual: keys and values are
copied verbatim between double quotes with no escaping, so callers must
keep quotes and delimiters out of them.
"""
import re
from typing import Final

from ..exceptions import InvalidArgumentError, MalformedInputError, NullInputError

__all__ = [
    "capitalize",
    "reverse",
    "count_char",
    "count_substring",
    "to_key_value_json",
    "extract_quoted_text",
]

PAIR_DELIMITER: Final[str] = "|"
KEY_VALUE_DELIMITER: Final[str] = ":"
EMPTY_JSON_OBJECT: Final[str] = "{}"
DEFAULT_QUOTE_CHAR: Final[str] = "'"


def _require_str_or_none(value: object, name: str = "value") -> None:
    if value is not None and not isinstance(value, str):
        raise TypeError(f"'{name}' must be a string, got {type(value).__name__} instead")


def capitalize(value: str | None) -> str | None:
    """Upper-case the first character of value if it is a letter.

    Unlike str.capitalize, the rest of the string is left untouched. A
    letter whose upper-case form is more than one character (such as "ß")
    is kept as is. None and the empty string are returned as given.
    """
    _require_str_or_none(value)
    if not value:
        return value
    first = value[0]
    upper = first.upper()
    if first.isalpha() and len(upper) == 1:
        return upper + value[1:]
    return value


def reverse(value: str | None) -> str | None:
    """Return value with its code points in reverse order.

    None and the empty string are returned as given.
    """
    _require_str_or_none(value)
    if not value:
        return value
    return value[::-1]


def count_char(value: str | None, char: str | None) -> int:
    """Count occurrences of a single character in value.

    Returns 0 when value or char is None or empty.

    Raises:
        InvalidArgumentError: If char has more than one character.
    """
    _require_str_or_none(value)
    _require_str_or_none(char, "char")
    if char is not None and len(char) > 1:
        raise InvalidArgumentError(f"'char' must be a single character, got {char!r}")
    if not value or not char:
        return 0
    return sum(1 for ch in value if ch == char)


def count_substring(value: str | None, search: str | None) -> int:
    """Count non-overlapping occurrences of search in value.

    Scanning goes left to right and resumes after the end of each match,
    so count_substring("aaaa", "aa") is 2. Returns 0 when either argument
    is None or empty.
    """
    _require_str_or_none(value)
    _require_str_or_none(search, "search")
    if not value or not search:
        return 0

    occurrences = 0
    index = value.find(search)
    while index >= 0:
        occurrences += 1
        index = value.find(search, index + len(search))
    return occurrences


def to_key_value_json(value: str | None) -> str:
    """Convert "key:value|key:value" notation into a JSON object string.

    Pairs keep their order and every value is emitted as a JSON string,
    without whitespace between tokens.

    Example:
        >>> to_key_value_json("name:John Doe|age:30")
        '{"name":"John Doe","age":"30"}'

    Args:
        value: Pipe-separated pairs, each split by a single colon.

    Returns:
        The JSON text, or "{}" when value is None or empty.

    Raises:
        MalformedInputError: If a pair does not split into exactly a key
            and a value.
    """
    _require_str_or_none(value)
    if not value:
        return EMPTY_JSON_OBJECT

    members = []
    for pair in value.split(PAIR_DELIMITER):
        parts = pair.split(KEY_VALUE_DELIMITER)
        if len(parts) != 2:
            raise MalformedInputError(
                f"Pair {pair!r} must have the form 'key{KEY_VALUE_DELIMITER}value'")
        key, item = parts
        members.append(f'"{key}":"{item}"')
    return "{" + ",".join(members) + "}"


def extract_quoted_text(value: str, quote_char: str = DEFAULT_QUOTE_CHAR) -> str:
    """Return the text between the first pair of quote characters.

    Matching is non-greedy and does not cross line breaks.

    Example:
        >>> extract_quoted_text("function(parameter1, 'This is the text to extract')")
        'This is the text to extract'

    Args:
        value: Text containing a quoted section.
        quote_char: The single character that opens and closes the section.

    Returns:
        The interior of the first quoted section (possibly empty).

    Raises:
        NullInputError: If value is None.
        InvalidArgumentError: If value is empty, quote_char is not a single
            character, or value has no complete quoted section.
    """
    if value is None:
        raise NullInputError("The input string must not be None")
    _require_str_or_none(value)
    if not value:
        raise InvalidArgumentError("The input string must not be empty")
    if not isinstance(quote_char, str) or len(quote_char) != 1:
        raise InvalidArgumentError(
            f"'quote_char' must be a single character, got {quote_char!r}")

    quote = re.escape(quote_char)
    match = re.search(f"{quote}(.*?){quote}", value)
    if match is None:
        raise InvalidArgumentError(
            f"The input string does not contain text enclosed in {quote_char!r}")
    return match.group(1)
