from __future__ import annotations

import logging
import typing as t

from redis import exceptions as redis_exc
from redis.asyncio import Redis

from ..errors import (
    ParameterAccessDeniedError,
    ParameterFetchError,
    ParameterNotFoundError,
    ParameterTransportError,
)
from .base import ParameterFetcher

_logger = logging.getLogger(__name__)


class RedisParameterStore(ParameterFetcher):
    """Reads parameters stored as plain strings at `{prefix}:{name}`."""

    def __init__(
        self,
        url: str = "redis://localhost:6379/0",
        *,
        prefix: str = "param",
        client: t.Optional[Redis] = None,
    ) -> None:
        self._prefix = prefix.rstrip(":")
        self._redis = client if client is not None else Redis.from_url(url, decode_responses=True)

    def _key(self, name: str) -> str:
        return f"{self._prefix}:{name}"

    async def fetch(self, name: str) -> str:
        key = self._key(name)
        try:
            raw = await self._redis.get(key)
        except redis_exc.AuthenticationError as exc:
            raise ParameterAccessDeniedError(f"redis rejected credentials reading {key}", parameter_name=name) from exc
        except (redis_exc.ConnectionError, redis_exc.TimeoutError) as exc:
            raise ParameterTransportError(f"redis unavailable reading {key}: {exc}", parameter_name=name) from exc
        except redis_exc.RedisError as exc:
            raise ParameterFetchError(f"redis error reading {key}: {exc}", parameter_name=name) from exc
        except UnicodeDecodeError as exc:
            raise ParameterFetchError(f"value at {key} is not valid UTF-8", parameter_name=name) from exc
        if raw is None:
            raise ParameterNotFoundError(f"parameter {name!r} not found", parameter_name=name)
        if isinstance(raw, (bytes, bytearray)):
            try:
                return raw.decode()
            except UnicodeDecodeError as exc:
                raise ParameterFetchError(f"value at {key} is not valid UTF-8", parameter_name=name) from exc
        return str(raw)

    async def put_parameter(self, name: str, value: str) -> None:
        await self._redis.set(self._key(name), value)
        _logger.debug("Stored parameter %s", name)

    async def aclose(self) -> None:
        await self._redis.aclose()
