"""
@lowercase / @uppercase - convert string results of a field.

    type Book {
        title: String! @uppercase
    }

Non-string results are returned unchanged.
"""

from __future__ import annotations

import logging
from typing import Callable

from graphql import GraphQLField, GraphQLObjectType

from schema_directives.core.defs import FIELD_LOCATIONS, DirectiveKind
from schema_directives.core.resolvers import wrap_resolver

from .base import DirectiveDefinition

logger = logging.getLogger(__name__)


class CaseDirective(DirectiveDefinition):
    """Wraps the resolver of annotated object fields with a string conversion."""

    locations = FIELD_LOCATIONS
    convert: Callable[[str], str]

    def visit_field(self, field: GraphQLField, field_name: str, parent) -> GraphQLField:
        if not isinstance(parent, GraphQLObjectType):
            return field
        if self.arguments_for(field) is None:
            return field

        logger.debug(f"@{self.name} applied to {parent.name}.{field_name}")
        convert = type(self).convert
        return GraphQLField(**{
            **field.to_kwargs(),
            "resolve": wrap_resolver(field.resolve, lambda value, args: convert(value)),
        })


class LowercaseDirective(CaseDirective):
    kind = DirectiveKind.LOWERCASE
    convert = str.lower


class UppercaseDirective(CaseDirective):
    kind = DirectiveKind.UPPERCASE
    convert = str.upper


def lowercase_directive(name: str = "lowercase") -> LowercaseDirective:
    return LowercaseDirective(name)


def uppercase_directive(name: str = "uppercase") -> UppercaseDirective:
    return UppercaseDirective(name)
