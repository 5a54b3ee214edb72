from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Optional

# 5 minutes, in nanoseconds
DEFAULT_CACHE_ITEM_TTL = 300_000_000_000
DEFAULT_MAX_CACHE_SIZE = 1


def _as_int(value: Any) -> Optional[int]:
    """Return ``value`` as an int, or None when it cannot be read as one."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        # non-numeric strings, NaN, infinities
        return None


@dataclass(frozen=True)
class CacheConfig:
    """Tunables for a ParameterCache.

    Values are normalized rather than rejected: a missing, non-numeric or
    non-positive ``max_cache_size`` becomes 1 and a missing, non-numeric or
    negative ``cache_item_ttl`` (nanoseconds) becomes 5 minutes. Numeric
    strings such as ``"8"`` are accepted, so settings read from text work.
    """

    max_cache_size: Optional[int] = None
    cache_item_ttl: Optional[int] = None

    def __post_init__(self) -> None:
        size = _as_int(self.max_cache_size)
        if size is None or size <= 0:
            size = DEFAULT_MAX_CACHE_SIZE
        ttl = _as_int(self.cache_item_ttl)
        if ttl is None or ttl < 0:
            ttl = DEFAULT_CACHE_ITEM_TTL
        # frozen dataclass
        object.__setattr__(self, "max_cache_size", size)
        object.__setattr__(self, "cache_item_ttl", ttl)

    @property
    def ttl_seconds(self) -> float:
        return self.cache_item_ttl / 1_000_000_000

    def with_max_cache_size(self, max_cache_size: Optional[int]) -> "CacheConfig":
        return dataclasses.replace(self, max_cache_size=max_cache_size)

    def with_cache_item_ttl(self, cache_item_ttl: Optional[int]) -> "CacheConfig":
        return dataclasses.replace(self, cache_item_ttl=cache_item_ttl)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CacheConfig":
        names = {f.name for f in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})
