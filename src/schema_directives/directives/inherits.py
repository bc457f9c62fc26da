"""
@inherits - copy the fields of other types into the annotated type.

    type Model {
        id: ID!
        createdAt: String!
        updatedAt: String
    }

    type Book @inherits(types: ["Model"]) {
        publisher: String!
        publisherID: Int!
    }

``Book`` ends up with ``publisher, publisherID, id, createdAt, updatedAt``.

Rules:
- sources are merged in list order; later sources win
- an inherited field replaces a receiver field of the same name (in place)
- inheritance is transitive: a source annotated with @inherits contributes
  its merged fields
- cycles are rejected with InheritanceCycleError
- object and interface types may inherit from each other; input types only
  from input types
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from graphql import (
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLObjectType,
    GraphQLSchema,
    is_input_object_type,
)

from schema_directives.core.defs import INHERITABLE_LOCATIONS, DirectiveKind, InheritsArgs
from schema_directives.core.errors import (
    InheritanceCycleError,
    InvalidInheritableTypeError,
    TypeNotFoundError,
)
from schema_directives.core.locator import locate_directive, parse_directive_args

from .base import DirectiveDefinition

logger = logging.getLogger(__name__)


Inheritable = Union[GraphQLObjectType, GraphQLInterfaceType, GraphQLInputObjectType]
FieldMap = dict[str, Union[GraphQLField, GraphQLInputField]]

INHERITABLE_TYPES = (GraphQLObjectType, GraphQLInterfaceType, GraphQLInputObjectType)


def _copy_field(field: Union[GraphQLField, GraphQLInputField]) -> Union[GraphQLField, GraphQLInputField]:
    return type(field)(**field.to_kwargs())


def _resolve_source(schema: GraphQLSchema, type_name: str, receiver: Inheritable) -> Inheritable:
    source = schema.get_type(type_name)
    if source is None:
        raise TypeNotFoundError(type_name, receiver.name)
    if not isinstance(source, INHERITABLE_TYPES):
        raise InvalidInheritableTypeError(
            type_name, receiver.name, f"must be one of {INHERITABLE_LOCATIONS}"
        )
    if is_input_object_type(source) != is_input_object_type(receiver):
        raise InvalidInheritableTypeError(
            type_name, receiver.name, "input and output types cannot inherit from each other"
        )
    return source


class InheritanceResolver:
    """
    Merges inherited fields for the types of one schema.

    One resolver serves one transformation pass: merged field sets are
    memoized so every receiving type is merged exactly once.
    """

    def __init__(self, schema: GraphQLSchema, directive_name: str):
        self.schema = schema
        self.directive_name = directive_name
        self._merged: dict[str, FieldMap] = {}

    def sources_of(self, type_: Inheritable) -> Optional[list[str]]:
        """Names listed in the type's @inherits, or None if not annotated."""
        application = locate_directive(self.schema, type_, self.directive_name)
        if application is None:
            return None
        args: InheritsArgs = parse_directive_args(DirectiveKind.INHERITS, application)
        return args.types

    def merged_fields(self, type_: Inheritable, chain: tuple[str, ...] = ()) -> FieldMap:
        """Own fields of ``type_`` merged with every field it inherits."""
        if type_.name in chain:
            raise InheritanceCycleError([*chain, type_.name])
        if type_.name in self._merged:
            return self._merged[type_.name]

        fields: FieldMap = dict(type_.fields)
        source_names = self.sources_of(type_) or []
        for source_name in source_names:
            source = _resolve_source(self.schema, source_name, type_)
            for name, field in self.merged_fields(source, (*chain, type_.name)).items():
                fields[name] = _copy_field(field)

        self._merged[type_.name] = fields
        return fields

    def inherit(self, receiver: Inheritable) -> Inheritable:
        """Rebuild ``receiver`` with its inherited fields, or return it as-is."""
        source_names = self.sources_of(receiver)
        if source_names is None:
            return receiver

        fields = self.merged_fields(receiver)
        logger.debug(
            f"@{self.directive_name}: '{receiver.name}' inherits {source_names} "
            f"-> fields {list(fields)}"
        )
        return type(receiver)(**{**receiver.to_kwargs(), "fields": fields})


def inherit_fields(
    receiver: Inheritable,
    source_names: list[str],
    schema: GraphQLSchema,
) -> Inheritable:
    """
    Copy every field of the named source types into ``receiver``.

    Sources are read as declared in ``schema`` (not transitively).

    Raises:
        TypeNotFoundError: A source name is not in the schema.
        InvalidInheritableTypeError: A source is not an object, interface
            or input type, or mixes input and output kinds with the receiver.
    """
    fields: FieldMap = dict(receiver.fields)
    for source_name in source_names:
        source = _resolve_source(schema, source_name, receiver)
        for name, field in source.fields.items():
            fields[name] = _copy_field(field)
    return type(receiver)(**{**receiver.to_kwargs(), "fields": fields})


class InheritsDirective(DirectiveDefinition):
    """Applies @inherits to object, interface and input object types."""

    kind = DirectiveKind.INHERITS
    locations = INHERITABLE_LOCATIONS
    arguments = "types: [String!]!"

    _resolver: Optional[InheritanceResolver] = None

    def transform(self, schema: GraphQLSchema) -> GraphQLSchema:
        self._resolver = InheritanceResolver(schema, self.name)
        try:
            return super().transform(schema)
        finally:
            self._resolver = None

    def visit_object_type(self, type_: GraphQLObjectType) -> GraphQLObjectType:
        return self._resolver.inherit(type_)

    def visit_interface_type(self, type_: GraphQLInterfaceType) -> GraphQLInterfaceType:
        return self._resolver.inherit(type_)

    def visit_input_object_type(self, type_: GraphQLInputObjectType) -> GraphQLInputObjectType:
        return self._resolver.inherit(type_)


def inherits_directive(name: str = "inherits") -> InheritsDirective:
    return InheritsDirective(name)
