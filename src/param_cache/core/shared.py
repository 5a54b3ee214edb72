from __future__ import annotations

import asyncio
import contextlib
import typing as t

from .parameter_cache import ParameterCache


class SharedParameterCache:
    """A ParameterCache guarded by one lock, for use from many tasks.

    Build it once at startup and hand it to the code that needs parameters.
    Lookups are serialized, so concurrent callers asking for the same missing
    key trigger one fetch between them.
    """

    def __init__(self, cache: ParameterCache) -> None:
        self._cache = cache
        self._lock = asyncio.Lock()

    @contextlib.asynccontextmanager
    async def acquire(self) -> t.AsyncIterator[ParameterCache]:
        async with self._lock:
            yield self._cache

    async def get_parameter(self, parameter_name: str, force_refresh: bool = False) -> str:
        async with self.acquire() as cache:
            return await cache.lookup(parameter_name, force_refresh=force_refresh)
