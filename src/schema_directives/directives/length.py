"""
@length - enforce a minimum and/or maximum length on scalar fields.

    type Book {
        # at most 80 characters
        title: String! @length(max: 80)
    }

    input AuthorInput {
        alias: String @length(min: 2, max: 32)
    }

The field type is replaced by a synthesized scalar (``StringWithLengthAtMost80``)
whose serialize() validates the value. Input coercion (parse_value /
parse_literal) delegates to the base scalar unchanged: the constraint applies
to results only.

One synthesized scalar serves every field with the same base and bounds, so
query-time errors carry no ``field`` extension; the error ``path`` names the
field instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from graphql import GraphQLField, GraphQLInputField, GraphQLScalarType, GraphQLSchema
from graphql.language import ValueNode

from schema_directives.core.defs import LENGTH_LOCATIONS, DirectiveKind, LengthArgs
from schema_directives.core.errors import DirectiveConfigError
from schema_directives.core.synthesis import ScalarSynthesizer, wrap_scalar_type
from schema_directives.validation.length import LengthValidator

from .base import DirectiveDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LengthConstraint:
    """Minimum and/or maximum length. At least one bound is set."""
    min: Optional[int] = None
    max: Optional[int] = None

    def __post_init__(self):
        if self.min is None and self.max is None:
            raise DirectiveConfigError("Expected at least one argument of 'min' | 'max'")
        if any(bound is not None and bound < 0 for bound in (self.min, self.max)):
            raise DirectiveConfigError(f"Length bounds must not be negative: {self}")

    @classmethod
    def from_args(cls, args: LengthArgs) -> "LengthConstraint":
        return cls(min=args.min, max=args.max)

    @property
    def signature(self) -> str:
        """Type name suffix, e.g. ``AtLeast2AtMost32``."""
        parts = []
        if self.min is not None:
            parts.append(f"AtLeast{self.min}")
        if self.max is not None:
            parts.append(f"AtMost{self.max}")
        return "".join(parts)

    def validate(self, value: Any) -> bool:
        """Raise LengthValueError unless ``value`` satisfies the constraint."""
        if self.min is not None and self.max is not None:
            return LengthValidator.range(value, self.min, self.max)
        if self.min is not None:
            return LengthValidator.min(value, self.min)
        return LengthValidator.max(value, self.max)


class LengthConstrainedScalar(GraphQLScalarType):
    """Scalar delegating to ``base``, validating length on serialization."""

    def __init__(self, base: GraphQLScalarType, constraint: LengthConstraint):
        self.base = base
        self.constraint = constraint
        super().__init__(
            name=f"{base.name}WithLength{constraint.signature}",
            description=base.description,
            specified_by_url=base.specified_by_url,
        )

    def serialize(self, value: Any) -> Any:
        serialized = self.base.serialize(value)
        self.constraint.validate(serialized)
        return serialized

    def parse_value(self, value: Any) -> Any:
        return self.base.parse_value(value)

    def parse_literal(self, node: ValueNode, variables: Optional[dict[str, Any]] = None) -> Any:
        return self.base.parse_literal(node, variables)


class LengthDirective(DirectiveDefinition):
    """Replaces annotated scalar field types with length-constrained scalars."""

    kind = DirectiveKind.LENGTH
    locations = LENGTH_LOCATIONS
    arguments = "min: Int, max: Int"

    def __init__(self, name: str):
        super().__init__(name)
        self.synthesizer: ScalarSynthesizer[LengthConstraint] = ScalarSynthesizer(LengthConstrainedScalar)

    def transform(self, schema: GraphQLSchema) -> GraphQLSchema:
        # Synthesized scalars wrap this schema's base scalars
        self.synthesizer.clear()
        return super().transform(schema)

    def constrained_type(self, type_, args: LengthArgs):
        constraint = LengthConstraint.from_args(args)
        return wrap_scalar_type(
            type_,
            lambda scalar: self.synthesizer.get_or_create(scalar, constraint),
        )

    def visit_field(self, field: GraphQLField, field_name: str, parent) -> GraphQLField:
        args = self.arguments_for(field)
        if args is None:
            return field
        logger.debug(f"@{self.name} applied to {parent.name}.{field_name}")
        return GraphQLField(**{**field.to_kwargs(), "type_": self.constrained_type(field.type, args)})

    def visit_input_field(self, field: GraphQLInputField, field_name: str, parent) -> GraphQLInputField:
        args = self.arguments_for(field)
        if args is None:
            return field
        logger.debug(f"@{self.name} applied to {parent.name}.{field_name}")
        return GraphQLInputField(**{**field.to_kwargs(), "type_": self.constrained_type(field.type, args)})


def length_directive(name: str = "length") -> LengthDirective:
    return LengthDirective(name)
