"""
Core definitions for the schema directives system.

Each supported directive is one DirectiveKind; every kind carries a typed
argument record that is validated once, when the directive application is
read from the schema.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


DEFAULT_DATE_FORMAT = "mmmm d, yyyy"


class DirectiveKind(str, Enum):
    """
    Supported directive kinds.

    Declaration order is application order: type-level rewrites run before
    field-level ones so fields copied by inheritance are decorated too.
    """
    INHERITS = "inherits"
    LENGTH = "length"
    DATE = "date"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"

    @property
    def order(self) -> int:
        return list(DirectiveKind).index(self)


# SDL directive locations
FIELD_LOCATIONS = "FIELD_DEFINITION"
LENGTH_LOCATIONS = "FIELD_DEFINITION | INPUT_FIELD_DEFINITION"
INHERITABLE_LOCATIONS = "OBJECT | INPUT_OBJECT | INTERFACE"


@dataclass(frozen=True)
class DirectiveApplication:
    """A directive applied to one schema element."""
    name: str
    args: dict[str, Any] = field(default_factory=dict)


# =============================================================================
# Argument records
# =============================================================================


class DirectiveArgs(BaseModel):
    """Base class for typed directive arguments."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


class CaseArgs(DirectiveArgs):
    """@lowercase / @uppercase take no arguments."""
    pass


class DateArgs(DirectiveArgs):
    """
    Arguments of @date.

    Example:
        publishDate: Date! @date(defaultFormat: "d mmm yyyy")
    """
    default_format: Optional[str] = Field(default=None, alias="defaultFormat")


class LengthArgs(DirectiveArgs):
    """
    Arguments of @length. At least one bound is required.

    Example:
        alias: String @length(min: 2, max: 32)
    """
    min: Optional[int] = None
    max: Optional[int] = None

    @model_validator(mode="after")
    def _check_bounds(self) -> "LengthArgs":
        if self.min is None and self.max is None:
            raise ValueError("Expected at least one argument of 'min' | 'max'")
        if any(bound is not None and bound < 0 for bound in (self.min, self.max)):
            raise ValueError("Length bounds must not be negative")
        return self


class InheritsArgs(DirectiveArgs):
    """
    Arguments of @inherits.

    Example:
        type Book @inherits(types: ["Model"]) { ... }
    """
    types: list[str]


ARGUMENT_MODELS: dict[DirectiveKind, type[DirectiveArgs]] = {
    DirectiveKind.INHERITS: InheritsArgs,
    DirectiveKind.LENGTH: LengthArgs,
    DirectiveKind.DATE: DateArgs,
    DirectiveKind.LOWERCASE: CaseArgs,
    DirectiveKind.UPPERCASE: CaseArgs,
}
