#!/usr/bin/env python3

import asyncio
import logging
import time

import click

from param_cache import (
    CacheConfig,
    ParameterCache,
    ParameterFetchError,
    RedisParameterStore,
    ResilientFetcher,
    SharedParameterCache,
)
from param_cache.monitoring import param_cache_lookups_total


async def handle_request(request_id: int, cache: SharedParameterCache, names: list[str]) -> None:
    # every handler gets the same cache passed in; nothing is global
    for name in names:
        try:
            value = await cache.get_parameter(name)
            print(f"[{time.strftime('%H:%M:%S')}] request {request_id}: {name}={value}")
        except ParameterFetchError as e:
            print(f"[{time.strftime('%H:%M:%S')}] request {request_id}: {name} failed: {e}")


async def run(redis_url: str, names: list[str], requests: int, seed: bool) -> None:
    store = RedisParameterStore(redis_url)
    if seed:
        for name in names:
            await store.put_parameter(name, f"value-for-{name}")

    # built once at startup, then handed to each handler
    fetcher = ResilientFetcher(store, attempts=3, backoff_ms=[50, 200], timeout_seconds=2.0)
    cache = SharedParameterCache(
        ParameterCache.new_with_config(fetcher, CacheConfig(max_cache_size=len(names), cache_item_ttl=30_000_000_000))
    )
    try:
        await asyncio.gather(*(handle_request(i, cache, names) for i in range(requests)))
    finally:
        await store.aclose()

    for labels, count in sorted(param_cache_lookups_total.values.items()):
        print(f"lookups {dict(labels)}: {int(count)}")


@click.command()
@click.argument("names", nargs=-1)
@click.option("--redis-url", default="redis://localhost:6379/0", help="Redis URL holding parameters at param:<name>")
@click.option("--requests", default=5, show_default=True, help="Number of concurrent simulated requests")
@click.option("--seed/--no-seed", default=False, help="Write demo values for NAMES before reading them")
def main(names: tuple[str, ...], redis_url: str, requests: int, seed: bool) -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(run(redis_url, list(names) or ["service/parameter"], requests, seed))


if __name__ == "__main__":
    main()
