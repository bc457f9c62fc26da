"""
Schema directives - declarative schema transformations for graphql-core.

Directives declared in SDL rewrite the schema before it is executed:
- @inherits copies fields between object, interface and input types
- @length constrains the length of scalar values
- @date formats date results
- @lowercase / @uppercase convert string results

Usage:
    from graphql import graphql_sync
    from schema_directives import create_registry

    registry = create_registry()
    schema = registry.build_schema('''
        type Query {
            title: String! @uppercase @length(max: 80)
        }
    ''')
    graphql_sync(schema, "{ title }", root_value={"title": "dune"})
"""

from __future__ import annotations

from .config import DirectiveNames, DirectiveSettings, create_registry, load_settings
from .core import (
    DEFAULT_DATE_FORMAT,
    DirectiveApplication,
    DirectiveConfigError,
    DirectiveError,
    DirectiveKind,
    DirectiveRegistry,
    FieldValueError,
    InheritanceCycleError,
    InvalidInheritableTypeError,
    ScalarSynthesizer,
    SchemaVisitor,
    TypeNotFoundError,
    TypeReferenceError,
    UnmeasurableValueError,
    compose_transforms,
    locate_directive,
    map_schema,
    strip_directives,
    wrap_resolver,
    wrap_scalar_type,
)
from .directives import (
    DateDirective,
    DirectiveDefinition,
    InheritsDirective,
    LengthDirective,
    LowercaseDirective,
    UppercaseDirective,
    date_directive,
    format_date,
    inherit_fields,
    inherits_directive,
    length_directive,
    lowercase_directive,
    uppercase_directive,
)
from .validation import LengthValidator, LengthValueError, measure_length

__version__ = "0.1.0"

__all__ = [
    # Config
    "DirectiveNames",
    "DirectiveSettings",
    "create_registry",
    "load_settings",
    # Core
    "DEFAULT_DATE_FORMAT",
    "DirectiveApplication",
    "DirectiveKind",
    "DirectiveRegistry",
    "SchemaVisitor",
    "ScalarSynthesizer",
    "compose_transforms",
    "locate_directive",
    "map_schema",
    "strip_directives",
    "wrap_resolver",
    "wrap_scalar_type",
    # Errors
    "DirectiveError",
    "DirectiveConfigError",
    "TypeReferenceError",
    "TypeNotFoundError",
    "InvalidInheritableTypeError",
    "InheritanceCycleError",
    "UnmeasurableValueError",
    "FieldValueError",
    "LengthValueError",
    # Directives
    "DirectiveDefinition",
    "DateDirective",
    "InheritsDirective",
    "LengthDirective",
    "LowercaseDirective",
    "UppercaseDirective",
    "date_directive",
    "format_date",
    "inherit_fields",
    "inherits_directive",
    "length_directive",
    "lowercase_directive",
    "uppercase_directive",
    # Validation
    "LengthValidator",
    "measure_length",
]
