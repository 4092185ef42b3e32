"""Declarative cache decorators.

These decorators attach a caching rule to an async function, the way
method-level caching annotations do in other frameworks. Each one is
bound to an explicit CacheRegion; nothing is looked up at runtime.

Example:
    region = CacheRegion(CachePolicy.for_persons(), backend, key_builder, serializer)

    @cacheable(region, key="{person_id}", unless=lambda p: p.age < 29)
    async def get_person(person_id: int) -> Person:
        return await store.get(person_id)

    @cache_put(region, key="{person.id}")
    async def update_person(person: Person) -> Person:
        return await store.save(person)

    @cache_evict(region, all_entries=True)
    async def delete_person(person_id: int) -> None:
        await store.delete(person_id)
"""

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from cacheaside.core.services.cache_region import CacheRegion

F = TypeVar("F", bound=Callable[..., Any])

KeySpec = str | Callable[..., Any]


def cacheable(
    region: CacheRegion,
    key: KeySpec,
    unless: Callable[[Any], bool] | None = None,
) -> Callable[[F], F]:
    """Decorator for cache-aside reads.

    Returns the cached value when present without calling the function.
    On a miss the function runs and its result is cached unless it is
    None or ``unless(result)`` is true. When ``unless`` is omitted the
    region policy predicate applies.

    Args:
        region: The cache region.
        key: ``str.format`` template over the call arguments, or a
            callable receiving the same arguments.
        unless: Optional conditional-skip predicate on the result.

    Returns:
        Decorated function.
    """
    skip = unless if unless is not None else region.policy.should_skip

    def decorator(func: F) -> F:
        signature = inspect.signature(func)

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            entity_id = _resolve_key(key, signature, args, kwargs)

            cached = await region.get(entity_id)
            if cached is not None:
                return cached

            result = await func(*args, **kwargs)

            if result is not None and not skip(result):
                await region.put(entity_id, result)

            return result

        return wrapper  # type: ignore

    return decorator


def cache_put(
    region: CacheRegion,
    key: KeySpec,
) -> Callable[[F], F]:
    """Decorator for write-through updates.

    Always runs the function and always stores its result, ignoring
    any conditional-skip predicate.

    Args:
        region: The cache region.
        key: ``str.format`` template over the call arguments, or a
            callable receiving the same arguments.

    Returns:
        Decorated function.
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = await func(*args, **kwargs)

            if result is not None:
                entity_id = _resolve_key(key, signature, args, kwargs)
                await region.put(entity_id, result)

            return result

        return wrapper  # type: ignore

    return decorator


def cache_evict(
    region: CacheRegion,
    key: KeySpec | None = None,
    all_entries: bool = False,
) -> Callable[[F], F]:
    """Decorator for invalidation.

    Runs the function first and evicts only if it returns normally.

    Args:
        region: The cache region.
        key: Key of the single entry to evict. Ignored with ``all_entries``.
        all_entries: Clear the whole region instead of one key.

    Returns:
        Decorated function.

    Raises:
        ValueError: If neither ``key`` nor ``all_entries`` is given.
    """
    if key is None and not all_entries:
        raise ValueError("cache_evict needs a key or all_entries=True")

    def decorator(func: F) -> F:
        signature = inspect.signature(func)

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = await func(*args, **kwargs)

            if all_entries:
                await region.clear()
            elif key is not None:
                await region.evict(_resolve_key(key, signature, args, kwargs))

            return result

        return wrapper  # type: ignore

    return decorator


def _resolve_key(
    key: KeySpec,
    signature: inspect.Signature,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> Any:
    """Compute the entity id part of the cache key for a call.

    Args:
        key: Template or callable.
        signature: Signature of the decorated function.
        args: Positional arguments.
        kwargs: Keyword arguments.

    Returns:
        The entity id used to build the region key.
    """
    if callable(key):
        return key(*args, **kwargs)

    bound = signature.bind(*args, **kwargs)
    bound.apply_defaults()
    return key.format_map(bound.arguments)
