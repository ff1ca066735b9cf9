"""Operations that grow, shrink, or overwrite a sequence.

Growth and shrink operations (append, insert_at, remove_all) never touch
their input: they build and return a new list of the adjusted length.
In-place operations (clear, reverse_in_place) keep the length and mutate
the caller's sequence.
"""
from collections.abc import MutableSequence, Sequence
from decimal import Decimal
from fractions import Fraction
from typing import Any, Final, TypeVar

from ..exceptions import IndexOutOfRangeError, InvalidArgumentError, NullInputError

__all__ = ["append", "clear", "insert_at", "reverse_in_place", "remove_all"]

T = TypeVar('T')

# Numeric value types only; text and containers are references and clear to None.
_ZERO_VALUE_TYPES: Final[tuple[type, ...]] = (
    bool, int, float, complex, Decimal, Fraction)

_UNSET: Final[Any] = object()


def _require_sequence(sequence: Any, name: str = "sequence") -> None:
    if sequence is None:
        raise NullInputError(f"'{name}' must not be None")
    if not isinstance(sequence, Sequence) or isinstance(sequence, (str, bytes)):
        raise TypeError(
            f"'{name}' must be a sequence, got {type(sequence).__name__} instead")


def _zero_value_of(element: Any) -> Any:
    """Return the zero value for the type of element.

    Built-in numeric types map to their zero instance (bool resolves to
    False, not 0); anything else, including str and bytes, maps to None.
    """
    for zero_type in _ZERO_VALUE_TYPES:
        if type(element) is zero_type:
            return zero_type()
    return None


def append(sequence: Sequence[T], *items: T) -> list[T]:
    """Return a new list with items added after the elements of sequence.

    Args:
        sequence: The source sequence. Left unchanged.
        *items: One or more values to place at the end, in order.

    Returns:
        A list of length len(sequence) + len(items).

    Raises:
        NullInputError: If sequence is None.
        InvalidArgumentError: If no items are given.
    """
    _require_sequence(sequence)
    if not items:
        raise InvalidArgumentError("At least one item to append is required")
    return [*sequence, *items]


def clear(sequence: MutableSequence[Any], *, fill_value: Any = _UNSET) -> None:
    """Overwrite every element of sequence with its type's zero value.

    The length of the sequence does not change.

    Args:
        sequence: The sequence to clear in place.
        fill_value: If given, every slot receives this value instead of
            the per-element zero value.

    Raises:
        NullInputError: If sequence is None.
        TypeError: If sequence is not mutable.
    """
    if sequence is None:
        raise NullInputError("'sequence' must not be None")
    if not isinstance(sequence, MutableSequence):
        raise TypeError(
            f"'sequence' must be a mutable sequence, got {type(sequence).__name__} instead")
    for i, element in enumerate(sequence):
        sequence[i] = _zero_value_of(element) if fill_value is _UNSET else fill_value


def insert_at(sequence: Sequence[T], index: int, value: T) -> list[T]:
    """Return a new list with value inserted at index.

    Elements at index and after are shifted one position to the right.
    Inserting at len(sequence) appends to the end.

    Args:
        sequence: The source sequence. Left unchanged.
        index: Insertion position in the closed range [0, len(sequence)].
        value: The value to insert.

    Returns:
        A list of length len(sequence) + 1.

    Raises:
        NullInputError: If sequence is None.
        TypeError: If index is not an integer.
        IndexOutOfRangeError: If index is outside [0, len(sequence)].
    """
    _require_sequence(sequence)
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError(f"'index' must be an int, got {type(index).__name__} instead")
    if index < 0 or index > len(sequence):
        raise IndexOutOfRangeError(
            f"'index' must be within [0, {len(sequence)}], got {index}")
    result = list(sequence)
    result.insert(index, value)
    return result


def reverse_in_place(sequence: MutableSequence[Any]) -> None:
    """Reverse the order of the elements of sequence in place.

    Raises:
        NullInputError: If sequence is None.
        TypeError: If sequence is not mutable.
    """
    if sequence is None:
        raise NullInputError("'sequence' must not be None")
    if not isinstance(sequence, MutableSequence):
        raise TypeError(
            f"'sequence' must be a mutable sequence, got {type(sequence).__name__} instead")
    sequence.reverse()


def remove_all(sequence: Sequence[T], value: T) -> list[T]:
    """Return a new list without any element equal to value.

    The relative order of the remaining elements is preserved.

    Raises:
        NullInputError: If sequence is None.
    """
    _require_sequence(sequence)
    return [element for element in sequence if element != value]
