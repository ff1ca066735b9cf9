"""Read-only queries over sequences: counting, searching and emptiness checks."""
from collections.abc import Sequence
from typing import Any

from .sequence_mutators import _require_sequence

__all__ = ["count", "index_of", "is_null_or_empty", "is_null_or_all_elements_null"]


def count(sequence: Sequence[Any], value: Any) -> int:
    """Return how many elements of sequence are equal to value.

    Equality is value equality (==), not identity.

    Raises:
        NullInputError: If sequence is None.
    """
    _require_sequence(sequence)
    return sum(1 for element in sequence if element == value)


def index_of(sequence: Sequence[Any], value: Any) -> int:
    """Return the lowest index holding a value equal to value, or -1.

    Unlike list.index, a missing value is not an error.

    Raises:
        NullInputError: If sequence is None.
    """
    _require_sequence(sequence)
    for i, element in enumerate(sequence):
        if element == value:
            return i
    return -1


def is_null_or_empty(sequence: Sequence[Any] | None) -> bool:
    """Return True if sequence is None or has no elements."""
    return sequence is None or len(sequence) == 0


def is_null_or_all_elements_null(sequence: Sequence[Any] | None) -> bool:
    """Return True if sequence is None or none of its elements is set.

    An empty sequence has no non-None element, so it also yields True.
    """
    if sequence is None:
        return True
    return all(element is None for element in sequence)
