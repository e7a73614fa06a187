"""Result cache keyed by config, with an injected clock."""

from datetime import timedelta

import pytest
from conftest import entries

from devgraph.models import AggregationConfig, Platform
from devgraph.repositories.cache import CACHE_TTL, ContributionCache
from devgraph.services.errors import TransportError


class CountingFetch:
    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0

    async def __call__(self, config):
        self.calls += 1
        result = self.results[min(self.calls, len(self.results)) - 1]
        if isinstance(result, Exception):
            raise result
        return result


def config(**extra):
    return AggregationConfig.model_validate({"github": {"username": "octocat"}, **extra})


def test_default_ttl_is_thirty_minutes():
    assert CACHE_TTL == timedelta(minutes=30)


@pytest.mark.asyncio
async def test_identical_configs_fetch_once_within_ttl(clock):
    fetch = CountingFetch(entries(d2024_01_01=1))
    cache = ContributionCache(fetch, clock=clock)

    first = await cache.get_cached_contributions(config())
    clock.advance(minutes=29, seconds=59)
    second = await cache.get_cached_contributions(config())

    assert first == second == entries(d2024_01_01=1)
    assert fetch.calls == 1
    assert len(cache) == 1


@pytest.mark.asyncio
async def test_refetches_after_ttl(clock):
    fetch = CountingFetch(entries(d2024_01_01=1), entries(d2024_01_01=2))
    cache = ContributionCache(fetch, clock=clock)

    await cache.get_cached_contributions(config())
    clock.advance(minutes=30)
    refreshed = await cache.get_cached_contributions(config())

    assert fetch.calls == 2
    assert refreshed == entries(d2024_01_01=2)
    assert len(cache) == 1


@pytest.mark.asyncio
async def test_different_configs_have_separate_entries(clock):
    fetch = CountingFetch([])
    cache = ContributionCache(fetch, clock=clock)

    await cache.get_cached_contributions(config())
    await cache.get_cached_contributions(config(gitlab={"username": "me"}))
    await cache.get_cached_contributions(config(date_range={"start": "2024-01-01", "end": "2024-01-31"}))

    assert fetch.calls == 3
    assert len(cache) == 3


@pytest.mark.asyncio
async def test_failures_propagate_and_keep_previous_value(clock):
    error = TransportError(Platform.GITHUB, "github API error: 500 Internal Server Error", 500)
    fetch = CountingFetch(entries(d2024_01_01=4), error)
    cache = ContributionCache(fetch, clock=clock)

    await cache.get_cached_contributions(config())
    clock.advance(hours=1)
    with pytest.raises(TransportError):
        await cache.get_cached_contributions(config())

    assert cache._entries[config().cache_key()].result == entries(d2024_01_01=4)


@pytest.mark.asyncio
async def test_cached_result_cannot_be_mutated_by_callers(clock):
    cache = ContributionCache(CountingFetch(entries(d2024_01_01=1)), clock=clock)

    result = await cache.get_cached_contributions(config())
    result[0].count = 99
    result.clear()

    assert await cache.get_cached_contributions(config()) == entries(d2024_01_01=1)


def test_get_set_clear(clock):
    cache = ContributionCache(CountingFetch([]), ttl=timedelta(seconds=10), clock=clock)
    assert cache.get("k") is None

    cache.set("k", entries(d2024_01_01=1))
    assert cache.get("k") == entries(d2024_01_01=1)
    clock.advance(seconds=10)
    assert cache.get("k") is None

    cache.clear()
    assert len(cache) == 0
