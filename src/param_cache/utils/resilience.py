from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, List, Optional, TypeVar

from ..errors import CircuitOpenError

T = TypeVar("T")

_logger = logging.getLogger(__name__)


@dataclass
class CircuitBreakerConfig:
    failure_threshold: int = 5
    reset_timeout_seconds: float = 30.0


class CircuitState:
    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half_open"


class CircuitBreaker:
    """Stops calling a failing service until ``reset_timeout_seconds`` pass.

    ``is_failure`` decides which exceptions count against the threshold; the
    default counts every exception.
    """

    def __init__(
        self,
        config: Optional[CircuitBreakerConfig] = None,
        *,
        is_failure: Optional[Callable[[BaseException], bool]] = None,
    ) -> None:
        self._config = config or CircuitBreakerConfig()
        self._is_failure = is_failure or (lambda exc: True)
        self._state = CircuitState.CLOSED
        self._failures = 0
        self._opened_at = 0.0

    @property
    def state(self) -> str:
        return self._state

    def _can_attempt(self) -> bool:
        if self._state == CircuitState.OPEN:
            if (time.monotonic() - self._opened_at) >= self._config.reset_timeout_seconds:
                self._state = CircuitState.HALF_OPEN
                return True
            return False
        return True

    def _on_success(self) -> None:
        self._state = CircuitState.CLOSED
        self._failures = 0

    def _on_failure(self) -> None:
        self._failures += 1
        if self._state == CircuitState.HALF_OPEN or self._failures >= self._config.failure_threshold:
            if self._state != CircuitState.OPEN:
                _logger.warning("Circuit opened after %d failures", self._failures)
            self._state = CircuitState.OPEN
            self._opened_at = time.monotonic()

    async def run(self, fn: Callable[[], Awaitable[T]]) -> T:
        if not self._can_attempt():
            raise CircuitOpenError("circuit_open")
        try:
            result = await fn()
        except Exception as exc:
            if self._is_failure(exc):
                self._on_failure()
            raise
        else:
            self._on_success()
            return result


async def with_retries(
    coro_factory: Callable[[], Awaitable[T]],
    attempts: int = 3,
    backoff_ms: Optional[Iterable[int]] = None,
    *,
    retry_on: Optional[Callable[[BaseException], bool]] = None,
) -> T:
    """Await ``coro_factory()`` up to ``attempts`` times.

    Exceptions rejected by ``retry_on`` are raised at once.
    """
    backoff_seq: List[int] = list(backoff_ms or [100, 500, 2000])
    attempts = max(1, attempts)
    for attempt in range(attempts):
        try:
            return await coro_factory()
        except Exception as exc:  # noqa: BLE001 - broad for retry wrapper
            if attempt == attempts - 1 or (retry_on is not None and not retry_on(exc)):
                raise
            delay_ms = backoff_seq[min(attempt, len(backoff_seq) - 1)]
            _logger.warning("Attempt %d/%d failed (%s); retrying in %dms", attempt + 1, attempts, exc, delay_ms)
            await asyncio.sleep(delay_ms / 1000.0)
    raise AssertionError("unreachable")


async def with_timeout(coro_factory: Callable[[], Awaitable[T]], seconds: Optional[float]) -> T:
    """Await ``coro_factory()``, raising ``asyncio.TimeoutError`` after ``seconds``."""
    if seconds is None:
        return await coro_factory()
    return await asyncio.wait_for(coro_factory(), timeout=seconds)
