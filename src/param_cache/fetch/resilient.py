from __future__ import annotations

import asyncio
import typing as t

from ..errors import ParameterNotFoundError, ParameterTransportError
from ..utils.resilience import CircuitBreaker, with_retries, with_timeout
from .base import FetchFn, ParameterFetcher


def _is_transient(exc: BaseException) -> bool:
    return not isinstance(exc, ParameterNotFoundError)


class ResilientFetcher(ParameterFetcher):
    """Adds retries, a per-attempt timeout and an optional circuit breaker to a fetcher.

    Pass it to ParameterCache in place of the raw fetcher. Missing parameters are
    never retried and never trip the breaker. A timed out attempt surfaces as
    ParameterTransportError.
    """

    def __init__(
        self,
        fetcher: t.Union[ParameterFetcher, FetchFn],
        *,
        attempts: int = 3,
        backoff_ms: t.Optional[t.List[int]] = None,
        timeout_seconds: t.Optional[float] = None,
        breaker: t.Optional[CircuitBreaker] = None,
    ) -> None:
        self._fetch: FetchFn = getattr(fetcher, "fetch", fetcher)
        self._attempts = attempts
        self._backoff_ms = backoff_ms or [100, 500, 2000]
        self._timeout_seconds = timeout_seconds
        self._breaker = breaker

    async def _attempt(self, name: str) -> str:
        try:
            return await with_timeout(lambda: self._fetch(name), self._timeout_seconds)
        except asyncio.TimeoutError as exc:
            raise ParameterTransportError(
                f"fetching {name!r} timed out after {self._timeout_seconds}s", parameter_name=name
            ) from exc

    async def fetch(self, name: str) -> str:
        async def _op() -> t.Union[str, ParameterNotFoundError]:
            try:
                return await with_retries(
                    lambda: self._attempt(name), self._attempts, self._backoff_ms, retry_on=_is_transient
                )
            except ParameterNotFoundError as exc:
                # the service answered; not a breaker failure
                return exc

        if self._breaker is None:
            result = await _op()
        else:
            result = await self._breaker.run(_op)
        if isinstance(result, ParameterNotFoundError):
            raise result
        return result
