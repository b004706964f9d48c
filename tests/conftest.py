"""Pytest configuration and fixtures for ant-cache tests."""

import pytest

from ant_cache import AntCache, CacheConfig, HookBus, MemoryEntryStore


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """Fake monotonic clock starting at 1000s."""
    return FakeClock()


@pytest.fixture
def default_config():
    """Small TTL configuration used across facade tests."""
    return CacheConfig(ttl_seconds=4, check_period_seconds=2, max_keys=0)


@pytest.fixture
def make_cache(clock, default_config):
    """Factory for caches driven by the fake clock; disposes them after the test."""
    created = []

    def factory(**overrides):
        config = default_config.model_copy(update=overrides) if overrides else default_config
        cache = AntCache(config, clock=clock)
        created.append(cache)
        return cache

    yield factory

    for cache in created:
        cache.dispose()


@pytest.fixture
def cache(make_cache):
    """Cache with the default test configuration."""
    return make_cache()


@pytest.fixture
def store(clock):
    """Unbounded entry store tracking metadata."""
    return MemoryEntryStore(clock=clock)


@pytest.fixture
def hook_bus():
    """Fresh hook bus."""
    return HookBus()
