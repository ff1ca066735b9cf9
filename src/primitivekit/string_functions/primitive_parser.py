"""Conversion of text into integers, decimals, floats and booleans.

Integer parsing is strict base-10 with width checks. Decimal and float
parsing try two interpretations in a fixed order: first with a comma as
the decimal separator, then with a period (where commas may group the
integer digits). The first interpretation that succeeds wins, so an
ambiguous input such as "1,234" is read as 1.234, not 1234.
"""
import logging
import math
import re
from collections.abc import Callable
from decimal import Context, Decimal
from typing import Final, TypeVar

from ..exceptions import FormatError, InvalidArgumentError, NullInputError

__all__ = [
    "to_int16",
    "to_int32",
    "to_int64",
    "to_decimal",
    "to_float",
    "to_boolean",
]

logger = logging.getLogger(__name__)

N = TypeVar('N')

INT16_RANGE: Final[tuple[int, int]] = (-2**15, 2**15 - 1)
INT32_RANGE: Final[tuple[int, int]] = (-2**31, 2**31 - 1)
INT64_RANGE: Final[tuple[int, int]] = (-2**63, 2**63 - 1)

# Order matters: comma is tried before period.
DECIMAL_SEPARATORS: Final[tuple[str, ...]] = (",", ".")
GROUP_SEPARATOR: Final[str] = ","

# Arithmetic precision; parsed values may carry one more digit so that
# DECIMAL_MAX_MAGNITUDE itself is representable.
DECIMAL_PRECISION: Final[int] = 28
DECIMAL_MAX_DIGITS: Final[int] = 29
DECIMAL_MAX_MAGNITUDE: Final[Decimal] = Decimal("79228162514264337593543950335")
DECIMAL_CONTEXT: Final[Context] = Context(prec=DECIMAL_PRECISION)
_DECIMAL_PARSE_CONTEXT: Final[Context] = Context(prec=DECIMAL_MAX_DIGITS)

# Widest int64 magnitude, 9223372036854775808, has 19 digits.
_INTEGER_MAX_DIGITS: Final[int] = 19

_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"\s*[+-]?[0-9]+\s*")

_FLOAT_SPECIAL_VALUES: Final[dict[str, float]] = {
    "nan": math.nan,
    "infinity": math.inf,
    "+infinity": math.inf,
    "-infinity": -math.inf,
}


def _build_number_pattern(decimal_separator: str) -> re.Pattern[str]:
    """Compile the number grammar for one choice of decimal separator.

    Group separators are only recognized in the integer part, and only
    when they differ from the decimal separator.
    """
    if decimal_separator == GROUP_SEPARATOR:
        integer_part = r"[0-9]*"
    else:
        integer_part = rf"(?:[0-9][0-9{re.escape(GROUP_SEPARATOR)}]*)?"
    return re.compile(
        rf"(?P<sign>[+-]?)"
        rf"(?P<integer>{integer_part})"
        rf"(?:{re.escape(decimal_separator)}(?P<fraction>[0-9]*))?"
        rf"(?P<exponent>[eE][+-]?[0-9]+)?"
    )


_NUMBER_PATTERNS: Final[dict[str, re.Pattern[str]]] = {
    separator: _build_number_pattern(separator) for separator in DECIMAL_SEPARATORS
}


def _require_text(value: str | None) -> str:
    """Validate that value is a non-empty string and return it.

    Raises:
        NullInputError: If value is None.
        TypeError: If value is not a string.
        InvalidArgumentError: If value is empty.
    """
    if value is None:
        raise NullInputError("The input string must not be None")
    if not isinstance(value, str):
        raise TypeError(f"The input must be a string, got {type(value).__name__} instead")
    if not value:
        raise InvalidArgumentError("The input string must not be empty")
    return value


def _normalize_number(value: str, decimal_separator: str) -> str | None:
    """Rewrite value into Python's numeric literal form, or return None.

    Surrounding whitespace, one leading sign or enclosing parentheses
    (meaning negative), group separators in the integer part and an
    exponent are accepted. At least one digit must be present.

    Args:
        value: Raw text to interpret.
        decimal_separator: Character that separates integer and fraction.

    Returns:
        A string accepted by both Decimal() and float(), e.g. "-1234.5e2",
        or None if value does not match the grammar.
    """
    body = value.strip()
    negative = False
    if len(body) >= 2 and body[0] == "(" and body[-1] == ")":
        negative = True
        body = body[1:-1].strip()

    match = _NUMBER_PATTERNS[decimal_separator].fullmatch(body)
    if match is None:
        return None
    if negative and match["sign"]:
        return None

    integer = match["integer"].replace(GROUP_SEPARATOR, "")
    fraction = match["fraction"] or ""
    if not integer and not fraction:
        return None

    sign = "-" if negative else match["sign"]
    return f"{sign}{integer or '0'}.{fraction or '0'}{match['exponent'] or ''}"


def _to_bounded_decimal(normalized: str) -> Decimal | None:
    try:
        number = Decimal(normalized)
    except ArithmeticError:
        return None
    if not number.is_finite():
        return None
    rounded = _DECIMAL_PARSE_CONTEXT.create_decimal(number)
    if rounded.copy_abs() > DECIMAL_MAX_MAGNITUDE:
        return None
    return rounded


def _try_separators(value: str, convert: Callable[[str], N | None]) -> N | None:
    """Try each decimal separator in order and return the first conversion.

    Args:
        value: Non-empty text to parse.
        convert: Turns a normalized literal into the target type; returns
            None when the literal is out of range for that type.

    Returns:
        The first successful conversion, or None if no separator yields
        a valid value.
    """
    for separator in DECIMAL_SEPARATORS:
        normalized = _normalize_number(value, separator)
        if normalized is None:
            continue
        result = convert(normalized)
        if result is None:
            continue
        logger.debug("Parsed %r using %r as decimal separator", value, separator)
        return result
    return None


def _parse_decimal_or_none(value: str) -> Decimal | None:
    """Parse value like to_decimal but return None instead of raising."""
    return _try_separators(value, _to_bounded_decimal)


def _parse_integer(value: str | None, bounds: tuple[int, int], type_name: str) -> int:
    value = _require_text(value)
    if _INTEGER_PATTERN.fullmatch(value) is None:
        raise FormatError(
            f"The input string {value!r} is not in a valid format for an {type_name} value")
    low, high = bounds
    out_of_range = FormatError(
        f"The input string {value!r} is outside the {type_name} range [{low}, {high}]")
    significant_digits = value.strip().lstrip("+-").lstrip("0")
    if len(significant_digits) > _INTEGER_MAX_DIGITS:
        raise out_of_range
    result = int(value)
    if not low <= result <= high:
        raise out_of_range
    return result


def to_int16(value: str) -> int:
    """Parse value as a signed 16-bit base-10 integer.

    Raises:
        NullInputError: If value is None.
        InvalidArgumentError: If value is empty.
        FormatError: If value is not an integer or overflows 16 bits.
    """
    return _parse_integer(value, INT16_RANGE, "Int16")


def to_int32(value: str) -> int:
    """Parse value as a signed 32-bit base-10 integer.

    Raises:
        NullInputError: If value is None.
        InvalidArgumentError: If value is empty.
        FormatError: If value is not an integer or overflows 32 bits.
    """
    return _parse_integer(value, INT32_RANGE, "Int32")


def to_int64(value: str) -> int:
    """Parse value as a signed 64-bit base-10 integer.

    Raises:
        NullInputError: If value is None.
        InvalidArgumentError: If value is empty.
        FormatError: If value is not an integer or overflows 64 bits.
    """
    return _parse_integer(value, INT64_RANGE, "Int64")


def to_decimal(value: str) -> Decimal:
    """Parse value as a decimal number, comma separator first.

    "123,45" and "123.45" both give Decimal("123.45"). Values are rounded
    to 29 significant digits; magnitudes above DECIMAL_MAX_MAGNITUDE are
    rejected.

    Args:
        value: Text to parse.

    Returns:
        The parsed Decimal.

    Raises:
        NullInputError: If value is None.
        InvalidArgumentError: If value is empty.
        FormatError: If neither the comma nor the period reading is valid.
    """
    value = _require_text(value)
    result = _parse_decimal_or_none(value)
    if result is None:
        raise FormatError(
            f"The input string {value!r} is not in a valid format for a decimal value")
    return result


def to_float(value: str) -> float:
    """Parse value as a float, comma separator first.

    Besides ordinary numbers, "NaN", "Infinity" and "-Infinity" are
    accepted in any letter case. Out-of-range magnitudes become infinity.

    Raises:
        NullInputError: If value is None.
        InvalidArgumentError: If value is empty.
        FormatError: If neither the comma nor the period reading is valid.
    """
    value = _require_text(value)
    special = _FLOAT_SPECIAL_VALUES.get(value.strip().lower())
    if special is not None:
        return special
    result = _try_separators(value, float)
    if result is None:
        raise FormatError(
            f"The input string {value!r} is not in a valid format for a float value")
    return result


def to_boolean(value: str) -> bool:
    """Parse value as a boolean.

    A single digit is read as a flag: "1" is True and "0" is False. Any
    other input must be the literal "true" or "false", compared without
    regard to case or surrounding whitespace.

    Raises:
        NullInputError: If value is None.
        InvalidArgumentError: If value is empty.
        FormatError: For other digits ("5"), digit strings ("11") and any
            text that is not a boolean literal.
    """
    value = _require_text(value)
    if len(value) == 1 and value.isdecimal():
        if value == "1":
            return True
        if value == "0":
            return False

    literal = value.strip().lower()
    if literal == "true":
        return True
    if literal == "false":
        return False
    raise FormatError(
        f"The input string {value!r} is not in a valid format for a boolean value")
