"""
Redis cache utility - used for per-user stats and chart data.
If Redis unavailable, caching is disabled and all ops no-op.

Entries are keyed by a per-user generation. Invalidation bumps the generation
instead of deleting, so a value computed before a write and stored after it
lands under a key no reader asks for again.
"""
import json
import logging
from typing import Any

from jobify.app.core.config import settings

logger = logging.getLogger(__name__)
_client = None


def generation_key(name: str, user_id: int) -> str:
    """Counter bumped whenever the user's `name` entries go stale."""
    return f"{name}:gen:{user_id}"


def entry_key(name: str, user_id: int, generation: int) -> str:
    return f"{name}:{user_id}:{generation}"


async def connect() -> None:
    global _client
    url = settings.redis_url
    if not url:
        logger.warning("redis_url not set, caching disabled")
        return
    try:
        from redis import asyncio as aioredis
        _client = aioredis.Redis.from_url(
            url, encoding="utf-8", decode_responses=True
        )
        await _client.ping()
        logger.info("Redis connected, caching enabled")
    except Exception as e:
        _client = None
        logger.warning("Redis connect failed: %s, caching disabled", e)


async def close() -> None:
    global _client
    if not _client:
        return
    try:
        await _client.aclose()
    except Exception as e:
        logger.debug("Redis close failed: %s", e)
    _client = None


async def get(key: str) -> Any:
    if not _client:
        return None
    try:
        val = await _client.get(key)
        return json.loads(val) if val else None
    except Exception as e:
        logger.debug("Redis get failed key=%s: %s", key, e)
        return None


async def set(key: str, value: Any, ttl: int | None = None) -> None:
    if not _client:
        return
    ttl_val = ttl if ttl is not None else settings.stats_cache_ttl
    try:
        await _client.set(key, json.dumps(value), ex=ttl_val)
    except Exception as e:
        logger.debug("Redis set failed key=%s: %s", key, e)


async def incr(key: str) -> int:
    if not _client:
        return 0
    try:
        return await _client.incr(key)
    except Exception as e:
        logger.debug("Redis incr failed key=%s: %s", key, e)
        return 0


async def current_generation(name: str, user_id: int) -> int:
    """Generation readers should cache under; 0 when unset or Redis is off."""
    value = await get(generation_key(name, user_id))
    return value if isinstance(value, int) else 0
