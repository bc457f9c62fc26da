"""
Core module - definitions, errors and the transformation engine.
"""

from __future__ import annotations

from .defs import (
    ARGUMENT_MODELS,
    DEFAULT_DATE_FORMAT,
    CaseArgs,
    DateArgs,
    DirectiveApplication,
    DirectiveArgs,
    DirectiveKind,
    InheritsArgs,
    LengthArgs,
)
from .errors import (
    DirectiveConfigError,
    DirectiveError,
    FieldValueError,
    InheritanceCycleError,
    InvalidInheritableTypeError,
    TypeNotFoundError,
    TypeReferenceError,
    UnmeasurableValueError,
)
from .locator import locate_directive, parse_directive_args
from .mapper import SchemaTransform, SchemaVisitor, compose_transforms, map_schema, strip_directives
from .registry import DirectiveRegistry
from .resolvers import wrap_resolver
from .synthesis import ScalarSynthesizer, SynthesisKey, wrap_scalar_type

__all__ = [
    # Definitions
    "ARGUMENT_MODELS",
    "DEFAULT_DATE_FORMAT",
    "CaseArgs",
    "DateArgs",
    "DirectiveApplication",
    "DirectiveArgs",
    "DirectiveKind",
    "InheritsArgs",
    "LengthArgs",
    # Errors
    "DirectiveError",
    "DirectiveConfigError",
    "TypeReferenceError",
    "TypeNotFoundError",
    "InvalidInheritableTypeError",
    "InheritanceCycleError",
    "UnmeasurableValueError",
    "FieldValueError",
    # Engine
    "locate_directive",
    "parse_directive_args",
    "SchemaTransform",
    "SchemaVisitor",
    "compose_transforms",
    "map_schema",
    "strip_directives",
    "wrap_resolver",
    "ScalarSynthesizer",
    "SynthesisKey",
    "wrap_scalar_type",
    # Registry
    "DirectiveRegistry",
]
