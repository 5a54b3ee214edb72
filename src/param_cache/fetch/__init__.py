from .base import FetchFn, InMemoryParameterStore, ParameterFetcher
from .http import HttpParameterStore
from .redis import RedisParameterStore
from .resilient import ResilientFetcher

__all__ = [
    "FetchFn",
    "ParameterFetcher",
    "InMemoryParameterStore",
    "RedisParameterStore",
    "HttpParameterStore",
    "ResilientFetcher",
]
