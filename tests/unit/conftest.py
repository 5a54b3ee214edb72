"""Shared fixtures and fakes for unit tests."""

from __future__ import annotations

import pytest

from param_cache.config import CacheConfig
from param_cache.core.parameter_cache import ParameterCache
from param_cache.fetch.base import InMemoryParameterStore

SECOND_NS = 1_000_000_000
MINUTE_NS = 60 * SECOND_NS


class FakeClock:
    """Monotonic nanosecond clock advanced by hand."""

    def __init__(self, start: int = 1_000 * SECOND_NS) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ns: int) -> None:
        self.now += ns


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    """Parameter store seeded with a few values."""
    return InMemoryParameterStore(
        {
            "a": "1",
            "b": "2",
            "c": "3",
            "service/parameter": "secret-value",
        }
    )


@pytest.fixture
def make_cache(store, clock):
    """Build a ParameterCache over the seeded store with a fake clock."""

    def _make(max_cache_size=None, cache_item_ttl=None, client=None):
        config = CacheConfig(max_cache_size=max_cache_size, cache_item_ttl=cache_item_ttl)
        return ParameterCache(client or store, config, clock=clock)

    return _make
