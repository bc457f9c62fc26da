"""
Directive registry - collects directive definitions and applies them.

Usage:
    from schema_directives.core.registry import DirectiveRegistry
    from schema_directives.directives import inherits_directive, uppercase_directive

    registry = DirectiveRegistry()
    registry.register(inherits_directive())
    registry.register(uppercase_directive("upper"))

    schema = registry.build_schema('''
        type Query { name: String @upper }
    ''')
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from graphql import GraphQLSchema, build_schema

from .errors import DirectiveConfigError
from .mapper import compose_transforms, strip_directives

if TYPE_CHECKING:
    from schema_directives.directives.base import DirectiveDefinition

logger = logging.getLogger(__name__)


class DirectiveRegistry:
    """
    Ordered set of directive definitions.

    Definitions are applied by kind (type-level @inherits first, then the
    field-level kinds), in registration order within one kind.

    Example:
        registry = DirectiveRegistry()
        registry.register(length_directive())
        sdl = registry.type_defs + my_sdl
        schema = registry.transform(build_schema(sdl))
    """

    def __init__(self):
        self._definitions: dict[str, DirectiveDefinition] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[DirectiveDefinition]:
        return iter(self.ordered())

    def __len__(self) -> int:
        return len(self._definitions)

    def get(self, name: str) -> DirectiveDefinition | None:
        return self._definitions.get(name)

    def register(self, definition: DirectiveDefinition) -> DirectiveDefinition:
        """
        Register a directive definition.

        Raises:
            DirectiveConfigError: If a directive with the same name exists.
        """
        if definition.name in self._definitions:
            raise DirectiveConfigError(f"Directive '@{definition.name}' is already registered")
        self._definitions[definition.name] = definition
        logger.debug(f"Registered directive @{definition.name} ({definition.kind.value})")
        return definition

    def ordered(self) -> list[DirectiveDefinition]:
        """Definitions in application order."""
        return sorted(self._definitions.values(), key=lambda d: d.kind.order)

    @property
    def type_defs(self) -> str:
        """SDL declarations of every registered directive."""
        return "\n".join(d.type_defs for d in self.ordered())

    def transform(self, schema: GraphQLSchema) -> GraphQLSchema:
        """
        Apply every registered directive to ``schema``.

        The result no longer declares or applies the registered directives,
        so transforming it again changes nothing.
        """
        definitions = self.ordered()
        transformed = compose_transforms(*(d.transform for d in definitions))(schema)
        transformed = strip_directives(transformed, [d.name for d in definitions])
        logger.info(f"Applied {len(definitions)} schema directives")
        return transformed

    def build_schema(self, sdl: str) -> GraphQLSchema:
        """Build a schema from ``sdl`` (with directive declarations prepended) and transform it."""
        return self.transform(build_schema(f"{self.type_defs}\n{sdl}"))
