"""Core module: the cache engine and its call surfaces."""

from .parameter_cache import ParameterCache
from .request import GetParameterRequest
from .shared import SharedParameterCache

__all__ = [
    "ParameterCache",
    "GetParameterRequest",
    "SharedParameterCache",
]
