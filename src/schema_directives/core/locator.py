"""
Directive locator - finds directive applications on schema elements.

Directives are read from the element's SDL nodes (definition first, then
extensions) or, for programmatically built elements, from
``extensions["directives"]``:

    GraphQLField(GraphQLString, extensions={"directives": {"uppercase": {}}})

Usage:
    from schema_directives.core.locator import locate_directive

    application = locate_directive(schema, field, "length")
    if application is not None:
        args = parse_directive_args(DirectiveKind.LENGTH, application)
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

from graphql import GraphQLDirective, GraphQLSchema, Undefined, value_from_ast_untyped
from graphql.execution.values import get_argument_values
from graphql.language import DirectiveNode
from pydantic import ValidationError

from .defs import ARGUMENT_MODELS, DirectiveApplication, DirectiveArgs, DirectiveKind
from .errors import DirectiveConfigError


def _directive_nodes(element: Any) -> Iterator[DirectiveNode]:
    """Yield directive nodes of an element in declaration order."""
    nodes = [getattr(element, "ast_node", None)]
    nodes.extend(getattr(element, "extension_ast_nodes", None) or ())
    for node in nodes:
        if node is None:
            continue
        yield from node.directives or ()


def _read_node_args(
    directive_def: Optional[GraphQLDirective],
    node: DirectiveNode,
) -> dict[str, Any]:
    if directive_def is not None:
        return dict(get_argument_values(directive_def, node))
    # Undeclared directive: read literals without coercion
    return {
        arg.name.value: value_from_ast_untyped(arg.value)
        for arg in node.arguments or ()
    }


def _apply_defaults(
    directive_def: Optional[GraphQLDirective],
    args: dict[str, Any],
) -> dict[str, Any]:
    if directive_def is None:
        return dict(args)
    merged = dict(args)
    for name, arg in directive_def.args.items():
        if name not in merged and arg.default_value is not Undefined:
            merged[name] = arg.default_value
    return merged


def locate_directive(
    schema: Optional[GraphQLSchema],
    element: Any,
    directive_name: str,
) -> Optional[DirectiveApplication]:
    """
    Return the first application of ``directive_name`` on ``element``.

    Args:
        schema: Schema declaring the directive; used to coerce arguments
            and fill in declared defaults. May be None.
        element: Named type, field or input field.
        directive_name: Directive name without the leading ``@``.

    Returns:
        DirectiveApplication, or None when the directive is not applied.
    """
    if not directive_name:
        raise DirectiveConfigError("Directive name must be a non-empty identifier")

    directive_def = schema.get_directive(directive_name) if schema is not None else None

    for node in _directive_nodes(element):
        if node.name.value == directive_name:
            return DirectiveApplication(
                name=directive_name,
                args=_read_node_args(directive_def, node),
            )

    extensions = getattr(element, "extensions", None) or {}
    declared = extensions.get("directives") or {}
    if directive_name in declared:
        args = declared[directive_name]
        # A repeated directive is stored as a list; first one wins
        if isinstance(args, list):
            args = args[0] if args else {}
        return DirectiveApplication(
            name=directive_name,
            args=_apply_defaults(directive_def, args or {}),
        )

    return None


def parse_directive_args(
    kind: DirectiveKind,
    application: DirectiveApplication,
) -> DirectiveArgs:
    """
    Validate a directive application into the typed record for ``kind``.

    Raises:
        DirectiveConfigError: If the arguments do not match the record.
    """
    model = ARGUMENT_MODELS[kind]
    try:
        return model.model_validate(application.args)
    except ValidationError as e:
        raise DirectiveConfigError(
            f"Invalid arguments for @{application.name}: {e}"
        ) from e
