"""Helper functions for lists and strings.

This package provides small, stateless helpers over sequences and strings:
inserting, removing and searching elements; classifying characters; parsing
numbers and booleans with comma-or-period decimal separators; turning
"key:value|key:value" text into JSON; extracting quoted text; and evaluating
arithmetic formulas.

Public API:
- append: Return a new list with items added at the end.
- clear: Overwrite every element with its type's zero value, in place.
- count: Count elements equal to a value.
- index_of: Lowest index of a value, or -1.
- insert_at: Return a new list with a value inserted at an index.
- reverse_in_place: Reverse a sequence in place.
- remove_all: Return a new list without any element equal to a value.
- is_null_or_empty: True for None or an empty sequence.
- is_null_or_all_elements_null: True for None or a sequence of Nones.
- capitalize: Upper-case the first character if it is a letter.
- reverse: Reverse the code points of a string.
- count_char: Count occurrences of a character.
- count_substring: Count non-overlapping occurrences of a substring.
- to_key_value_json: Convert "key:value|key:value" into a JSON object string.
- extract_quoted_text: Text between the first pair of quote characters.
- is_all_numeric, is_ascii, is_utf8, is_utf16, is_decimal_number,
  is_identifier, is_lower, is_upper, is_alpha: Character-class predicates.
- to_int16, to_int32, to_int64: Strict width-checked integer parsing.
- to_decimal, to_float: Numeric parsing, comma decimal separator first.
- to_boolean: Parse "1"/"0" and "true"/"false".
- calculate: Evaluate an arithmetic formula and return the result as text.
- evaluate: Evaluate an arithmetic expression to a Decimal.
- PrimitiveKitError and subclasses: Errors raised by the helpers.
"""

from ._version_info import __version__
from .array_functions import (
    append,
    clear,
    count,
    index_of,
    insert_at,
    is_null_or_all_elements_null,
    is_null_or_empty,
    remove_all,
    reverse_in_place,
)
from .exceptions import (
    EvaluationError,
    FormatError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    MalformedInputError,
    NullInputError,
    PrimitiveKitError,
)
from .string_functions import (
    calculate,
    capitalize,
    count_char,
    count_substring,
    evaluate,
    extract_quoted_text,
    is_all_numeric,
    is_alpha,
    is_ascii,
    is_decimal_number,
    is_identifier,
    is_lower,
    is_upper,
    is_utf16,
    is_utf8,
    reverse,
    to_boolean,
    to_decimal,
    to_float,
    to_int16,
    to_int32,
    to_int64,
    to_key_value_json,
)

__all__ = [
    'EvaluationError',
    'FormatError',
    'IndexOutOfRangeError',
    'InvalidArgumentError',
    'MalformedInputError',
    'NullInputError',
    'PrimitiveKitError',
    '__version__',
    'append',
    'calculate',
    'capitalize',
    'clear',
    'count',
    'count_char',
    'count_substring',
    'evaluate',
    'extract_quoted_text',
    'index_of',
    'insert_at',
    'is_all_numeric',
    'is_alpha',
    'is_ascii',
    'is_decimal_number',
    'is_identifier',
    'is_lower',
    'is_null_or_all_elements_null',
    'is_null_or_empty',
    'is_upper',
    'is_utf16',
    'is_utf8',
    'remove_all',
    'reverse',
    'reverse_in_place',
    'to_boolean',
    'to_decimal',
    'to_float',
    'to_int16',
    'to_int32',
    'to_int64',
    'to_key_value_json',
]
