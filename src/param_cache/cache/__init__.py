from .cache_item import CacheItem
from .lru import LRUCache

__all__ = [
    "CacheItem",
    "LRUCache",
]
