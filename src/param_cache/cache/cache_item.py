from __future__ import annotations

import time
import typing as t
from dataclasses import dataclass

V = t.TypeVar("V")


@dataclass(frozen=True)
class CacheItem(t.Generic[V]):
    """A cached value and the monotonic instant (ns) at which it goes stale."""

    value: V
    expires_at: int

    @classmethod
    def new(cls, value: V, ttl: int, now: t.Optional[int] = None) -> "CacheItem[V]":
        if now is None:
            now = time.monotonic_ns()
        return cls(value=value, expires_at=now + ttl)

    def is_expired(self, now: t.Optional[int] = None) -> bool:
        if now is None:
            now = time.monotonic_ns()
        return now >= self.expires_at
