"""
Base class for directive definitions.

A directive definition bundles:
- the SDL declaration of the directive (``type_defs``)
- a schema transform applying it (``transform``)

Subclasses are SchemaVisitors; transform() runs them through map_schema().
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from graphql import GraphQLSchema

from schema_directives.core.defs import DirectiveApplication, DirectiveArgs, DirectiveKind
from schema_directives.core.errors import DirectiveConfigError
from schema_directives.core.locator import locate_directive, parse_directive_args
from schema_directives.core.mapper import SchemaVisitor, map_schema

logger = logging.getLogger(__name__)


_NAME_PATTERN = re.compile(r"^[_a-zA-Z][_a-zA-Z0-9]*$")


class DirectiveDefinition(SchemaVisitor):
    """
    A named, schema-transforming directive.

    Attributes:
        kind: Which directive this is; selects the argument record.
        locations: SDL directive locations.
        arguments: SDL argument declarations, without parentheses.
    """

    kind: DirectiveKind
    locations: str
    arguments: str = ""

    def __init__(self, name: str):
        if not name or not _NAME_PATTERN.match(name):
            raise DirectiveConfigError(f"Invalid directive name: {name!r}")
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    @property
    def type_defs(self) -> str:
        """SDL declaration, e.g. ``directive @upper on FIELD_DEFINITION``."""
        args = f"({self.arguments})" if self.arguments else ""
        return f"directive @{self.name}{args} on {self.locations}"

    def locate(self, element) -> Optional[DirectiveApplication]:
        return locate_directive(self.schema, element, self.name)

    def arguments_for(self, element) -> Optional[DirectiveArgs]:
        """Typed arguments of this directive on ``element``, or None if not applied."""
        application = self.locate(element)
        if application is None:
            return None
        return parse_directive_args(self.kind, application)

    def transform(self, schema: GraphQLSchema) -> GraphQLSchema:
        """Return a new schema with this directive applied."""
        logger.debug(f"Applying @{self.name} directive")
        return map_schema(schema, self)

    def __call__(self, schema: GraphQLSchema) -> GraphQLSchema:
        return self.transform(schema)
