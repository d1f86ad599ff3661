"""
Cache invalidation messages sent by job mutations.

Each successful create/update/delete publishes the logical resources it made
stale (jobs, stats, charts) for one user. Listeners receive (user_id, resources):
the server-side Redis cache moves to a new generation, and the API echoes the same names
in a response header so the client query cache can refetch.
"""
from __future__ import annotations

from enum import Enum
from typing import Awaitable, Callable, Iterable

from jobify.app.core.logging_config import get_logger
from jobify.app.utils import cache

logger = get_logger("services.invalidation")


class CacheResource(str, Enum):
    JOBS = "jobs"
    STATS = "stats"
    CHARTS = "charts"


# Everything a job mutation can change
JOB_MUTATION_RESOURCES: frozenset[CacheResource] = frozenset(CacheResource)

Listener = Callable[[int, frozenset[CacheResource]], Awaitable[None]]


async def drop_server_cache(user_id: int, resources: frozenset[CacheResource]) -> None:
    """Bump the user's stats/charts generation. Job pages are not cached server-side."""
    for resource in (CacheResource.STATS, CacheResource.CHARTS):
        if resource in resources:
            await cache.incr(cache.generation_key(resource.value, user_id))


_listeners: list[Listener] = [drop_server_cache]


def subscribe(listener: Listener) -> None:
    if listener not in _listeners:
        _listeners.append(listener)


def unsubscribe(listener: Listener) -> None:
    if listener in _listeners:
        _listeners.remove(listener)


async def publish(user_id: int, resources: Iterable[CacheResource]) -> frozenset[CacheResource]:
    """Notify every listener. A failing listener is logged and does not stop the others."""
    stale = frozenset(resources)
    if not stale:
        return stale
    for listener in list(_listeners):
        try:
            await listener(user_id, stale)
        except Exception:
            logger.exception(
                "Invalidation listener failed user_id=%s listener=%s",
                user_id,
                getattr(listener, "__name__", repr(listener)),
            )
    logger.debug(
        "Invalidated user_id=%s resources=%s",
        user_id,
        ",".join(sorted(r.value for r in stale)),
    )
    return stale


def header_value(resources: Iterable[CacheResource]) -> str:
    """Header form of a resource set, e.g. "charts, jobs, stats"."""
    return ", ".join(sorted(r.value for r in resources))
