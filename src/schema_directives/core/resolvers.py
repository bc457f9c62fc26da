"""
Resolver wrapper - decorates field resolvers with a post-processing step.

The wrapped resolver keeps the execution contract of the original: a
synchronous original stays synchronous, an awaitable result is awaited
before the transform runs.
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Iterable, Optional

from graphql import GraphQLFieldResolver, GraphQLResolveInfo, default_field_resolver


ResultTransform = Callable[[Any, dict[str, Any]], Any]


def wrap_resolver(
    original: Optional[GraphQLFieldResolver],
    transform: ResultTransform,
    reserved_args: Iterable[str] = (),
    accepts: tuple[type, ...] = (str,),
) -> GraphQLFieldResolver:
    """
    Build a resolver that runs ``original`` and post-processes its result.

    Args:
        original: Resolver to wrap; the default field resolver when None.
        transform: Called as ``transform(value, args)`` with the settled
            value and every argument the caller supplied.
        reserved_args: Argument names owned by the directive; they are not
            forwarded to ``original``.
        accepts: Value types the transform applies to. Other values pass
            through unchanged.

    Returns:
        New resolver with the graphql-core signature ``(source, info, **args)``.
    """
    resolve = original or default_field_resolver
    reserved = frozenset(reserved_args)

    def finish(value: Any, args: dict[str, Any]) -> Any:
        if isinstance(value, accepts):
            return transform(value, args)
        return value

    def wrapped(source: Any, info: GraphQLResolveInfo, **args: Any) -> Any:
        forwarded = {k: v for k, v in args.items() if k not in reserved}
        result = resolve(source, info, **forwarded)

        if inspect.isawaitable(result):
            async def settle() -> Any:
                return finish(await result, args)

            return settle()

        return finish(result, args)

    return wrapped
