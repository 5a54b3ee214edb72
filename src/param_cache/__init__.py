"""param_cache

In-process caching of parameter values read from a remote key-value store.

Values live in an LRU mapping bounded by ``max_cache_size`` and are refetched
once older than ``cache_item_ttl``::

    store = RedisParameterStore("redis://localhost:6379/0")
    cache = ParameterCache.new(store)
    value = await cache.get_parameter("service/parameter").send()
"""

from .cache import CacheItem, LRUCache
from .config import DEFAULT_CACHE_ITEM_TTL, CacheConfig
from .core import GetParameterRequest, ParameterCache, SharedParameterCache
from .errors import (
    CircuitOpenError,
    ParameterAccessDeniedError,
    ParameterFetchError,
    ParameterNotFoundError,
    ParameterTransportError,
)
from .fetch import (
    HttpParameterStore,
    InMemoryParameterStore,
    ParameterFetcher,
    RedisParameterStore,
    ResilientFetcher,
)

__all__ = [
    "ParameterCache",
    "GetParameterRequest",
    "SharedParameterCache",
    "CacheConfig",
    "DEFAULT_CACHE_ITEM_TTL",
    "CacheItem",
    "LRUCache",
    "ParameterFetcher",
    "InMemoryParameterStore",
    "RedisParameterStore",
    "HttpParameterStore",
    "ResilientFetcher",
    "ParameterFetchError",
    "ParameterNotFoundError",
    "ParameterTransportError",
    "ParameterAccessDeniedError",
    "CircuitOpenError",
]

__version__ = "0.1.0"
