"""
Schema mapper - rebuilds a GraphQLSchema through a visitor.

A SchemaVisitor has one hook per element kind. map_schema() runs every hook
eagerly (so misuse of a directive fails at transform time, before any query
executes), then assembles a brand-new schema in which every reference to a
named type points at the rebuilt instance of that type.

The input schema is never mutated.

Usage:
    from schema_directives.core.mapper import SchemaVisitor, map_schema

    class Shout(SchemaVisitor):
        def visit_field(self, field, field_name, parent):
            return GraphQLField(**{**field.to_kwargs(), "description": "!"})

    new_schema = map_schema(schema, Shout())

    # drop declarations and applications once directives have been applied
    plain = strip_directives(new_schema, ["shout"])
"""

from __future__ import annotations

import logging
from copy import copy
from functools import reduce
from typing import Any, Callable, Iterable, Optional, Union

from graphql import (
    DirectiveNode,
    GraphQLArgument,
    GraphQLDirective,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLUnionType,
    is_input_object_type,
    is_interface_type,
    is_introspection_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_scalar_type,
    is_specified_directive,
    is_specified_scalar_type,
    is_union_type,
)

logger = logging.getLogger(__name__)


SchemaTransform = Callable[[GraphQLSchema], GraphQLSchema]
CompositeType = Union[GraphQLObjectType, GraphQLInterfaceType]


class SchemaVisitor:
    """
    Per-kind hooks applied by map_schema().

    Every hook returns the element to place in the new schema. The defaults
    return the element unchanged. Field hooks run on the fields of the type
    returned by the type hook, so fields added by a type hook are visited.
    """

    schema: Optional[GraphQLSchema] = None

    def visit_object_type(self, type_: GraphQLObjectType) -> GraphQLObjectType:
        return type_

    def visit_interface_type(self, type_: GraphQLInterfaceType) -> GraphQLInterfaceType:
        return type_

    def visit_input_object_type(self, type_: GraphQLInputObjectType) -> GraphQLInputObjectType:
        return type_

    def visit_scalar_type(self, type_: GraphQLScalarType) -> GraphQLScalarType:
        return type_

    def visit_field(
        self,
        field: GraphQLField,
        field_name: str,
        parent: CompositeType,
    ) -> GraphQLField:
        """Object and interface fields."""
        return field

    def visit_input_field(
        self,
        field: GraphQLInputField,
        field_name: str,
        parent: GraphQLInputObjectType,
    ) -> GraphQLInputField:
        return field

    def visit_directive(self, directive: GraphQLDirective) -> Optional[GraphQLDirective]:
        """Directive declarations; return None to drop one from the schema."""
        return directive


# =============================================================================
# Mapping
# =============================================================================


def _visit_type(visitor: SchemaVisitor, type_: GraphQLNamedType) -> GraphQLNamedType:
    """Apply the type hook, then the field hooks, for one named type."""
    if is_object_type(type_):
        mapped = visitor.visit_object_type(type_)
    elif is_interface_type(type_):
        mapped = visitor.visit_interface_type(type_)
    elif is_input_object_type(type_):
        mapped = visitor.visit_input_object_type(type_)
    elif is_scalar_type(type_) and not is_specified_scalar_type(type_):
        return visitor.visit_scalar_type(type_)
    else:
        return type_

    if is_input_object_type(mapped):
        fields = {
            name: visitor.visit_input_field(field, name, mapped)
            for name, field in mapped.fields.items()
        }
    else:
        fields = {
            name: visitor.visit_field(field, name, mapped)
            for name, field in mapped.fields.items()
        }
    return type(mapped)(**{**mapped.to_kwargs(), "fields": fields})


class _Rewirer:
    """Rebuilds composite types so references resolve into ``type_map``."""

    def __init__(self, type_map: dict[str, GraphQLNamedType]):
        self.type_map = type_map

    def type_ref(self, type_):
        if is_list_type(type_):
            return GraphQLList(self.type_ref(type_.of_type))
        if is_non_null_type(type_):
            return GraphQLNonNull(self.type_ref(type_.of_type))
        # Synthesized types are not in the map yet and are kept as-is
        return self.type_map.get(type_.name, type_)

    def args(self, args: dict[str, GraphQLArgument]) -> dict[str, GraphQLArgument]:
        return {
            name: GraphQLArgument(**{**arg.to_kwargs(), "type_": self.type_ref(arg.type)})
            for name, arg in args.items()
        }

    def field(self, field: GraphQLField) -> GraphQLField:
        return GraphQLField(**{
            **field.to_kwargs(),
            "type_": self.type_ref(field.type),
            "args": self.args(field.args),
        })

    def input_field(self, field: GraphQLInputField) -> GraphQLInputField:
        return GraphQLInputField(**{**field.to_kwargs(), "type_": self.type_ref(field.type)})

    def named_type(self, type_: GraphQLNamedType) -> GraphQLNamedType:
        kwargs = type_.to_kwargs()
        if is_object_type(type_) or is_interface_type(type_):
            fields = kwargs["fields"]
            interfaces = kwargs["interfaces"]
            kwargs["fields"] = lambda: {n: self.field(f) for n, f in fields.items()}
            kwargs["interfaces"] = lambda: [self.type_ref(i) for i in interfaces]
        elif is_input_object_type(type_):
            fields = kwargs["fields"]
            kwargs["fields"] = lambda: {n: self.input_field(f) for n, f in fields.items()}
        elif is_union_type(type_):
            types = kwargs["types"]
            kwargs["types"] = lambda: [self.type_ref(t) for t in types]
        else:
            return type_
        return type(type_)(**kwargs)

    def directive(self, directive: GraphQLDirective) -> GraphQLDirective:
        if is_specified_directive(directive):
            return directive
        return GraphQLDirective(**{**directive.to_kwargs(), "args": self.args(directive.args)})


def map_schema(schema: GraphQLSchema, visitor: SchemaVisitor) -> GraphQLSchema:
    """
    Rebuild ``schema`` through ``visitor``.

    Args:
        schema: Source schema (left untouched).
        visitor: Hooks to apply; ``visitor.schema`` is set to ``schema``
            for the duration of the pass.

    Returns:
        New GraphQLSchema.
    """
    visitor.schema = schema
    try:
        return _map_schema(schema, visitor)
    finally:
        visitor.schema = None


def _map_schema(schema: GraphQLSchema, visitor: SchemaVisitor) -> GraphQLSchema:
    mapped: dict[str, GraphQLNamedType] = {}
    for name, type_ in schema.type_map.items():
        if is_introspection_type(type_):
            continue
        new_type = _visit_type(visitor, type_)
        if new_type.name != name:
            logger.debug(f"Type '{name}' renamed to '{new_type.name}'")
        mapped[new_type.name] = new_type

    type_map: dict[str, GraphQLNamedType] = {}
    rewire = _Rewirer(type_map)
    for name, type_ in mapped.items():
        type_map[name] = rewire.named_type(type_)

    def root(type_: Optional[GraphQLObjectType]) -> Optional[GraphQLObjectType]:
        return type_map[type_.name] if type_ is not None else None

    directives = []
    for directive in schema.directives:
        kept = visitor.visit_directive(directive)
        if kept is not None:
            directives.append(rewire.directive(kept))

    return GraphQLSchema(
        query=root(schema.query_type),
        mutation=root(schema.mutation_type),
        subscription=root(schema.subscription_type),
        types=list(type_map.values()),
        directives=directives,
        description=schema.description,
        extensions=schema.extensions,
        ast_node=schema.ast_node,
        extension_ast_nodes=schema.extension_ast_nodes,
    )


def compose_transforms(*transforms: SchemaTransform) -> SchemaTransform:
    """Compose schema transforms, applied left to right."""
    def composed(schema: GraphQLSchema) -> GraphQLSchema:
        return reduce(lambda acc, transform: transform(acc), transforms, schema)

    return composed


# =============================================================================
# Directive removal
# =============================================================================


def _without_applications(node: Any, names: frozenset[str]) -> Any:
    """Copy of an AST node without applications of ``names``, or the node itself."""
    if node is None or not node.directives:
        return node
    kept: list[DirectiveNode] = [d for d in node.directives if d.name.value not in names]
    if len(kept) == len(node.directives):
        return node
    stripped = copy(node)
    stripped.directives = tuple(kept)
    return stripped


class _DirectiveStripper(SchemaVisitor):
    """Drops declarations and applications of the named directives."""

    def __init__(self, names: Iterable[str]):
        self.names = frozenset(names)

    def _changes(self, element: Any) -> dict[str, Any]:
        changes: dict[str, Any] = {}

        ast_node = _without_applications(element.ast_node, self.names)
        if ast_node is not element.ast_node:
            changes["ast_node"] = ast_node

        extension_nodes = getattr(element, "extension_ast_nodes", None)
        if extension_nodes:
            stripped = tuple(_without_applications(n, self.names) for n in extension_nodes)
            if any(a is not b for a, b in zip(stripped, extension_nodes)):
                changes["extension_ast_nodes"] = stripped

        declared = (element.extensions or {}).get("directives")
        if isinstance(declared, dict) and self.names & declared.keys():
            changes["extensions"] = {
                **element.extensions,
                "directives": {k: v for k, v in declared.items() if k not in self.names},
            }
        return changes

    def _rebuild(self, element):
        changes = self._changes(element)
        if not changes:
            return element
        return type(element)(**{**element.to_kwargs(), **changes})

    def visit_object_type(self, type_):
        return self._rebuild(type_)

    def visit_interface_type(self, type_):
        return self._rebuild(type_)

    def visit_input_object_type(self, type_):
        return self._rebuild(type_)

    def visit_scalar_type(self, type_):
        return self._rebuild(type_)

    def visit_field(self, field, field_name, parent):
        return self._rebuild(field)

    def visit_input_field(self, field, field_name, parent):
        return self._rebuild(field)

    def visit_directive(self, directive):
        return None if directive.name in self.names else directive


def strip_directives(schema: GraphQLSchema, names: Iterable[str]) -> GraphQLSchema:
    """
    Return a copy of ``schema`` without the named directives.

    Declarations are removed from ``schema.directives`` and applications are
    removed from the AST nodes and ``extensions["directives"]`` of types and
    fields, so the result carries no trace of them.
    """
    return map_schema(schema, _DirectiveStripper(names))
