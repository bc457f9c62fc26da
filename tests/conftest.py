"""Shared fixtures and helpers for schema directive tests."""

from typing import Any, Optional

import pytest
from graphql import ExecutionResult, GraphQLSchema, graphql_sync

from schema_directives import DirectiveRegistry, create_registry


BOOK_SDL = """
    type Model {
        id: ID!
        createdAt: String!
        updatedAt: String
    }

    type Book @inherits(types: ["Model"]) {
        publisher: String!
        publisherID: Int!
    }

    type Query {
        book: Book
    }
"""


def execute(schema: GraphQLSchema, query: str, root: Optional[dict[str, Any]] = None) -> ExecutionResult:
    return graphql_sync(schema, query, root_value=root)


def registry_with(*definitions) -> DirectiveRegistry:
    registry = DirectiveRegistry()
    for definition in definitions:
        registry.register(definition)
    return registry


@pytest.fixture
def registry() -> DirectiveRegistry:
    return create_registry()
