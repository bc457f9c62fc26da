"""
Length validation for field values.

The length of a value is:
- the value itself for integers
- the number of characters / items for strings and sequences

Every check either returns a boolean (``strict=False``) or raises
LengthValueError on failure (``strict=True``, the default).

Usage:
    LengthValidator.min("hello", 3)                 # True
    LengthValidator.max([1, 2, 3], 2, strict=False) # False
    LengthValidator.range("hi", 3, 5, field="alias")  # raises LengthValueError
"""

from __future__ import annotations

from typing import Any, Optional

from schema_directives.core.errors import FieldValueError, UnmeasurableValueError


def measure_length(value: Any, strict: bool = True) -> int:
    """
    Derive a length from ``value``.

    Values that have no length measure as 0 in strict mode and raise
    UnmeasurableValueError in non-strict mode.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, (str, list, tuple)):
        return len(value)
    if not strict:
        raise UnmeasurableValueError(value)
    return 0


class LengthValueError(FieldValueError):
    """A value whose length breaks a length constraint."""

    def __init__(self, length: int, constraint: str, field: Optional[str] = None):
        self.length = length
        self.constraint = constraint
        self.field = field
        super().__init__(
            f"Expected {length} to be {constraint}",
            extensions={"field": field} if field else None,
        )

    @classmethod
    def at_least(cls, length: int, expected: int, field: Optional[str] = None) -> "LengthValueError":
        return cls(length, f"at least {expected}", field)

    @classmethod
    def at_most(cls, length: int, expected: int, field: Optional[str] = None) -> "LengthValueError":
        return cls(length, f"at most {expected}", field)

    @classmethod
    def exactly(cls, length: int, expected: int, field: Optional[str] = None) -> "LengthValueError":
        return cls(length, f"exactly {expected}", field)

    @classmethod
    def between(cls, length: int, bounds: tuple[int, int], field: Optional[str] = None) -> "LengthValueError":
        start, end = sorted(bounds)
        return cls(length, f"between {start} and {end}", field)


class LengthValidator:
    """Length constraint checks."""

    @staticmethod
    def min(value: Any, expected: int, field: Optional[str] = None, strict: bool = True) -> bool:
        """Pass if length >= expected."""
        length = measure_length(value, strict)
        if length < expected:
            if not strict:
                return False
            raise LengthValueError.at_least(length, expected, field)
        return True

    @staticmethod
    def max(
        value: Any,
        expected: int,
        field: Optional[str] = None,
        strict: bool = True,
        inclusive: bool = True,
    ) -> bool:
        """
        Pass if length <= expected (inclusive) or length < expected.

        The bound is normalized to an exclusive one first; errors report the
        normalized bound.
        """
        length = measure_length(value, strict)
        bound = expected + 1 if inclusive else expected
        if length >= bound:
            if not strict:
                return False
            raise LengthValueError.at_most(length, bound, field)
        return True

    @staticmethod
    def exact(value: Any, expected: int, field: Optional[str] = None, strict: bool = True) -> bool:
        """Pass only if length == expected."""
        length = measure_length(value, strict)
        if length != expected:
            if not strict:
                return False
            raise LengthValueError.exactly(length, expected, field)
        return True

    @staticmethod
    def range(
        value: Any,
        min: int,
        max: int,
        field: Optional[str] = None,
        strict: bool = True,
    ) -> bool:
        """Pass only if both the min and the (inclusive) max checks pass."""
        length = measure_length(value, strict)
        if (
            LengthValidator.min(length, min, strict=False)
            and LengthValidator.max(length, max, strict=False)
        ):
            return True
        if not strict:
            return False
        raise LengthValueError.between(length, (min, max), field)
