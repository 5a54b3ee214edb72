from __future__ import annotations

import typing as t
from abc import ABC, abstractmethod

from ..errors import ParameterNotFoundError

FetchFn = t.Callable[[str], t.Awaitable[str]]


class ParameterFetcher(ABC):
    @abstractmethod
    async def fetch(self, name: str) -> str:  # pragma: no cover - interface
        """Return the current value of ``name`` or raise a ParameterFetchError."""
        raise NotImplementedError


class InMemoryParameterStore(ParameterFetcher):
    """A dict-backed fetcher for dev/test.

    Counts every fetch so callers can tell cache hits from remote calls.
    """

    def __init__(self, parameters: t.Optional[t.Dict[str, str]] = None) -> None:
        self._parameters: t.Dict[str, str] = dict(parameters or {})
        self.fetch_count = 0
        self.fetched: t.List[str] = []

    def put(self, name: str, value: str) -> None:
        self._parameters[name] = value

    def delete(self, name: str) -> None:
        self._parameters.pop(name, None)

    async def fetch(self, name: str) -> str:
        self.fetch_count += 1
        self.fetched.append(name)
        try:
            return self._parameters[name]
        except KeyError:
            raise ParameterNotFoundError(f"parameter {name!r} not found", parameter_name=name) from None
