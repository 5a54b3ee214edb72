from __future__ import annotations

import typing as t
from collections import OrderedDict

K = t.TypeVar("K")
V = t.TypeVar("V")


class LRUCache(t.Generic[K, V]):
    """Bounded mapping ordered by last get/put, oldest first.

    Expiry is not handled here; values carry their own.
    """

    def __init__(self, capacity: int = 1) -> None:
        self._store: "OrderedDict[K, V]" = OrderedDict()
        self._capacity = max(1, capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: K) -> t.Optional[V]:
        if key not in self._store:
            return None
        # mark as recently used
        self._store.move_to_end(key)
        return self._store[key]

    def peek(self, key: K) -> t.Optional[V]:
        return self._store.get(key)

    def put(self, key: K, value: V) -> t.Optional[t.Tuple[K, V]]:
        """Insert or replace ``key`` and return the evicted pair, if any."""
        self._store[key] = value
        self._store.move_to_end(key)
        if len(self._store) > self._capacity:
            return self._store.popitem(last=False)
        return None

    def keys(self) -> t.List[K]:
        return list(self._store.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)
