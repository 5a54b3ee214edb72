#!/usr/bin/env python3

import asyncio
import logging

import click

from param_cache import CacheConfig, HttpParameterStore, ParameterCache, ParameterFetchError, RedisParameterStore


def build_store(redis_url: str | None, http_url: str | None):
    if http_url:
        return HttpParameterStore(http_url)
    return RedisParameterStore(redis_url or "redis://localhost:6379/0")


async def run(name: str, store, ttl_seconds: int, max_size: int, force_refresh: bool) -> None:
    config = CacheConfig(max_cache_size=max_size, cache_item_ttl=ttl_seconds * 1_000_000_000)
    cache = ParameterCache.new_with_config(store, config)

    try:
        request = cache.get_parameter(name)
        if force_refresh:
            # fetch from the store and update the cache even if a fresh value is held
            request = request.force_refresh()
        value = await request.send()
        print(f"Successfully retrieved parameter {name}: {value}")

        # second read is served from memory
        again = await cache.get_parameter(name).send()
        print(f"Cached read of {name}: {again} ({len(cache)} cached)")
    except ParameterFetchError as e:
        # e.g. ParameterNotFoundError: the store has no such parameter
        print(f"ERROR: Error getting parameter '{name}'. {type(e).__name__}: {e}")
    finally:
        await store.aclose()


@click.command()
@click.argument("name", default="service/parameter")
@click.option("--redis-url", default=None, help="Redis URL holding parameters at param:<name>")
@click.option("--http-url", default=None, help="Base URL of an HTTP parameter service (overrides --redis-url)")
@click.option("--ttl", "ttl_seconds", default=300, show_default=True, help="Cache item TTL in seconds")
@click.option("--max-size", default=16, show_default=True, help="Maximum number of cached parameters")
@click.option("--force-refresh/--no-force-refresh", default=False, help="Bypass the cache for the first read")
@click.option("-v", "--verbose", is_flag=True, help="Log cache hits, misses and evictions")
def main(
    name: str,
    redis_url: str | None,
    http_url: str | None,
    ttl_seconds: int,
    max_size: int,
    force_refresh: bool,
    verbose: bool,
) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    asyncio.run(run(name, build_store(redis_url, http_url), ttl_seconds, max_size, force_refresh))


if __name__ == "__main__":
    main()
