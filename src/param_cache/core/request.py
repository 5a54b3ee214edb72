from __future__ import annotations

import typing as t

if t.TYPE_CHECKING:
    from .parameter_cache import ParameterCache


class GetParameterRequest:
    """Options for a single parameter lookup.

    Built by ParameterCache.get_parameter() and discarded after send().
    """

    def __init__(self, parameter_cache: "ParameterCache", parameter_name: str) -> None:
        self._parameter_cache = parameter_cache
        self.parameter_name = parameter_name
        self.force_refresh_enabled = False

    def force_refresh(self) -> "GetParameterRequest":
        """Fetch from the remote store even if a fresh value is cached.

        Useful when the cached value is out of date but not expired, for
        example right after a rotation.
        """
        self.force_refresh_enabled = True
        return self

    async def send(self) -> str:
        return await self._parameter_cache.lookup(self.parameter_name, force_refresh=self.force_refresh_enabled)
