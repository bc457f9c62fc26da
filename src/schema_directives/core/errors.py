"""
Custom exceptions for the schema directives system.

Three families:
- configuration errors: a directive is misused (raised at transform time)
- reference errors: a directive points at a type that cannot be used
- value errors: a resolved value breaks a constraint (raised at query time)
"""

from __future__ import annotations

from typing import Any, Optional

from graphql import GraphQLError


class DirectiveError(Exception):
    """Base exception for all transform-time directive errors."""
    pass


class DirectiveConfigError(DirectiveError):
    """Raised when a directive is declared or applied incorrectly."""
    pass


class TypeReferenceError(DirectiveError):
    """Raised when a directive references an unusable type."""

    def __init__(self, type_name: str, message: str):
        self.type_name = type_name
        super().__init__(message)


class TypeNotFoundError(TypeReferenceError):
    """Raised when a referenced type does not exist in the schema."""

    def __init__(self, type_name: str, receiver: str):
        self.receiver = receiver
        super().__init__(
            type_name,
            f"Type '{type_name}' cannot be inherited by '{receiver}' "
            f"because it does not exist in schema",
        )


class InvalidInheritableTypeError(TypeReferenceError):
    """Raised when a referenced type is not of an inheritable kind."""

    def __init__(self, type_name: str, receiver: str, reason: str):
        self.receiver = receiver
        super().__init__(
            type_name,
            f"Type '{type_name}' is not a valid inheritable type for '{receiver}': {reason}",
        )


class InheritanceCycleError(TypeReferenceError):
    """Raised when a type transitively inherits from itself."""

    def __init__(self, chain: list[str]):
        self.chain = chain
        super().__init__(
            chain[-1],
            f"Inheritance cycle detected: {' -> '.join(chain)}",
        )


class UnmeasurableValueError(DirectiveError, TypeError):
    """Raised when a length cannot be derived from a value."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Type of value must be one of 'sequence' | 'string' | 'integer', "
            f"got '{type(value).__name__}'"
        )


class FieldValueError(GraphQLError):
    """
    Query-time error for a field value that breaks a directive constraint.

    Subclasses GraphQLError so the execution layer reports it on the field
    and keeps the rest of the result.
    """

    CODE = "FIELD_VALUE_ERROR"

    def __init__(self, message: str, extensions: Optional[dict[str, Any]] = None):
        super().__init__(message, extensions={"code": self.CODE, **(extensions or {})})
