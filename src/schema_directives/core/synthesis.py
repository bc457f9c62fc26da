"""
Type synthesizer - creates constrained scalar types on demand.

Synthesized scalars are cached by structural key (base type name plus a
hashable constraint value), so applying the same constraint to the same base
type in several places yields one shared type instance. Each synthesizer owns
its cache; directive definitions hold one synthesizer each.

Usage:
    synthesizer = ScalarSynthesizer(LengthConstrainedScalar)
    field_type = wrap_scalar_type(
        field.type,
        lambda scalar: synthesizer.get_or_create(scalar, constraint),
    )
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, TypeVar

from graphql import (
    GraphQLInputType,
    GraphQLNonNull,
    GraphQLOutputType,
    GraphQLScalarType,
    is_non_null_type,
    is_scalar_type,
)

from .errors import DirectiveConfigError

logger = logging.getLogger(__name__)


C = TypeVar("C", bound=Hashable)


@dataclass(frozen=True)
class SynthesisKey(Generic[C]):
    """Cache key of a synthesized scalar."""
    base_name: str
    constraint: C


class ScalarSynthesizer(Generic[C]):
    """Builds and caches scalars derived from a base scalar and a constraint."""

    def __init__(self, factory: Callable[[GraphQLScalarType, C], GraphQLScalarType]):
        self.factory = factory
        self._cache: dict[SynthesisKey[C], GraphQLScalarType] = {}

    def __len__(self) -> int:
        return len(self._cache)

    def get_or_create(self, base: GraphQLScalarType, constraint: C) -> GraphQLScalarType:
        """Return the cached scalar for (base, constraint), creating it once."""
        key = SynthesisKey(base.name, constraint)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug(f"Synthesized type cache HIT: {cached.name}")
            return cached

        synthesized = self.factory(base, constraint)
        self._cache[key] = synthesized
        logger.debug(f"Synthesized type '{synthesized.name}' from '{base.name}'")
        return synthesized

    def clear(self) -> None:
        self._cache.clear()


def wrap_scalar_type(
    type_: GraphQLOutputType | GraphQLInputType,
    replace: Callable[[GraphQLScalarType], GraphQLScalarType],
) -> GraphQLOutputType | GraphQLInputType:
    """
    Replace the scalar of a field type, keeping a non-null wrapper.

    ``String`` becomes ``replace(String)``; ``String!`` becomes
    ``replace(String)!``. Anything else (lists, objects, enums) is rejected.

    Raises:
        DirectiveConfigError: If the type is not a scalar or non-null scalar.
    """
    if is_non_null_type(type_) and is_scalar_type(type_.of_type):
        return GraphQLNonNull(replace(type_.of_type))
    if is_scalar_type(type_):
        return replace(type_)
    raise DirectiveConfigError(f"Not a scalar type: {type_}")
