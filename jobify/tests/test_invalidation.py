"""Tests for job mutation cache invalidation"""
import asyncio
from unittest.mock import AsyncMock, call

from jobify.app.services import invalidation
from jobify.app.services.invalidation import CacheResource
from jobify.app.utils import cache


def test_publish_calls_subscribers():
    listener = AsyncMock()
    invalidation.subscribe(listener)
    try:
        stale = asyncio.run(invalidation.publish(3, [CacheResource.JOBS]))
    finally:
        invalidation.unsubscribe(listener)
    assert stale == frozenset({CacheResource.JOBS})
    listener.assert_awaited_once_with(3, frozenset({CacheResource.JOBS}))


def test_failing_listener_does_not_block_others():
    broken = AsyncMock(side_effect=RuntimeError("listener down"))
    healthy = AsyncMock()
    invalidation.subscribe(broken)
    invalidation.subscribe(healthy)
    try:
        asyncio.run(invalidation.publish(1, invalidation.JOB_MUTATION_RESOURCES))
    finally:
        invalidation.unsubscribe(broken)
        invalidation.unsubscribe(healthy)
    healthy.assert_awaited_once()


def test_publish_nothing_is_a_no_op():
    listener = AsyncMock()
    invalidation.subscribe(listener)
    try:
        asyncio.run(invalidation.publish(1, []))
    finally:
        invalidation.unsubscribe(listener)
    listener.assert_not_awaited()


def test_server_cache_generations_bumped():
    asyncio.run(invalidation.drop_server_cache(5, invalidation.JOB_MUTATION_RESOURCES))
    cache.incr.assert_has_awaits([call("stats:gen:5"), call("charts:gen:5")], any_order=True)


def test_jobs_only_leaves_server_cache():
    asyncio.run(invalidation.drop_server_cache(5, frozenset({CacheResource.JOBS})))
    cache.incr.assert_not_awaited()


def test_mutation_bumps_stats_generation(client, auth_headers, test_user, job_values):
    client.post("/api/jobs", headers=auth_headers, json=job_values)
    cache.incr.assert_has_awaits(
        [call(f"stats:gen:{test_user.id}"), call(f"charts:gen:{test_user.id}")], any_order=True
    )


def test_header_value_sorted():
    assert invalidation.header_value([CacheResource.STATS, CacheResource.CHARTS]) == "charts, stats"
