"""Exception hierarchy for primitivekit.

Every failure raised by the library derives from PrimitiveKitError and from
the closest built-in exception, so callers can catch either the specific
library error or the standard ValueError/IndexError they already handle.

Hierarchy:
    PrimitiveKitError
    ├── InvalidArgumentError (ValueError)
    │   ├── NullInputError
    │   └── IndexOutOfRangeError (IndexError)
    └── FormatError (ValueError)
        ├── MalformedInputError
        └── EvaluationError
"""

__all__ = [
    "PrimitiveKitError",
    "InvalidArgumentError",
    "NullInputError",
    "IndexOutOfRangeError",
    "FormatError",
    "MalformedInputError",
    "EvaluationError",
]


class PrimitiveKitError(Exception):
    """Base class for all errors raised by primitivekit."""


class InvalidArgumentError(PrimitiveKitError, ValueError):
    """A required argument is missing, empty, or structurally invalid."""


class NullInputError(InvalidArgumentError):
    """A required argument is None."""


class IndexOutOfRangeError(InvalidArgumentError, IndexError):
    """An index falls outside the range accepted by the operation."""


class FormatError(PrimitiveKitError, ValueError):
    """Text cannot be interpreted as the requested type."""


class MalformedInputError(FormatError):
    """Delimited text does not have the expected key/value structure."""


class EvaluationError(FormatError):
    """An arithmetic expression cannot be parsed or evaluated."""
