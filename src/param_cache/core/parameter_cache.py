from __future__ import annotations

import logging
import time
import typing as t

from param_cache.cache.cache_item import CacheItem
from param_cache.cache.lru import LRUCache
from param_cache.config import CacheConfig
from param_cache.fetch.base import FetchFn, ParameterFetcher
from param_cache.monitoring.metrics import (
    param_cache_evictions_total,
    param_cache_fetch_failures_total,
    param_cache_fetch_latency_seconds,
    param_cache_lookups_total,
)

from .request import GetParameterRequest

_logger = logging.getLogger(__name__)

Clock = t.Callable[[], int]


class ParameterCache:
    """In-process LRU cache of parameter values with a per-entry TTL.

    Values are served from memory while fresh and fetched from the remote
    store on a miss, on expiry, or when a refresh is forced. Fetch failures
    reach the caller untouched and leave the cache as it was.

    One instance is meant to have a single owner. Callers sharing it across
    tasks must serialize access themselves, see SharedParameterCache.
    """

    def __init__(
        self,
        client: t.Union[ParameterFetcher, FetchFn],
        config: t.Optional[CacheConfig] = None,
        *,
        clock: Clock = time.monotonic_ns,
    ) -> None:
        self._client = client
        self._fetch: FetchFn = getattr(client, "fetch", client)
        self._config = config or CacheConfig()
        self._clock = clock
        self._cache: LRUCache[str, CacheItem[str]] = LRUCache(self._config.max_cache_size)

    @classmethod
    def new(cls, client: t.Union[ParameterFetcher, FetchFn]) -> "ParameterCache":
        return cls(client, CacheConfig())

    @classmethod
    def new_with_config(cls, client: t.Union[ParameterFetcher, FetchFn], config: CacheConfig) -> "ParameterCache":
        return cls(client, config)

    @property
    def config(self) -> CacheConfig:
        return self._config

    @property
    def client(self) -> t.Union[ParameterFetcher, FetchFn]:
        return self._client

    def get_parameter(self, parameter_name: str) -> GetParameterRequest:
        """Return a request for ``parameter_name``; await its ``send()`` for the value."""
        return GetParameterRequest(self, parameter_name)

    async def lookup(self, parameter_name: str, force_refresh: bool = False) -> str:
        """Return the value of ``parameter_name``, fetching it only when needed.

        The remote store is called when the name is not cached, when the cached
        entry has expired, or when ``force_refresh`` is set. A successful fetch
        replaces the entry with one expiring ``cache_item_ttl`` from now.
        """
        if force_refresh:
            result = "forced"
        else:
            item = self._cache.get(parameter_name)
            if item is None:
                result = "miss"
            elif not item.is_expired(self._clock()):
                param_cache_lookups_total.inc(result="hit")
                _logger.debug("Cache hit for %s", parameter_name)
                return item.value
            else:
                result = "expired"
        param_cache_lookups_total.inc(result=result)
        _logger.debug("Cache %s for %s, fetching", result, parameter_name)

        value = await self._fetch_remote(parameter_name)

        evicted = self._cache.put(parameter_name, CacheItem.new(value, self._config.cache_item_ttl, self._clock()))
        if evicted is not None:
            param_cache_evictions_total.inc()
            _logger.debug("Evicted %s to make room for %s", evicted[0], parameter_name)
        return value

    async def _fetch_remote(self, parameter_name: str) -> str:
        started = time.perf_counter()
        try:
            value = await self._fetch(parameter_name)
        except Exception as exc:
            param_cache_fetch_failures_total.inc()
            _logger.warning("Fetching parameter %s failed: %s", parameter_name, exc)
            raise
        finally:
            param_cache_fetch_latency_seconds.observe(time.perf_counter() - started)
        return value

    def __contains__(self, parameter_name: object) -> bool:
        return parameter_name in self._cache

    def __len__(self) -> int:
        return len(self._cache)
