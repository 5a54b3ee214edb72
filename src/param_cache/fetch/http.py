from __future__ import annotations

import logging
import typing as t
from urllib.parse import quote

import httpx

from ..errors import (
    ParameterAccessDeniedError,
    ParameterFetchError,
    ParameterNotFoundError,
    ParameterTransportError,
)
from .base import ParameterFetcher

_logger = logging.getLogger(__name__)


class HttpParameterStore(ParameterFetcher):
    """Fetches parameters from a JSON endpoint.

    ``GET {base_url}/parameters/{name}`` must answer ``{"value": "..."}``.
    Names may contain slashes (``service/db/password``); they are kept as path
    segments.
    """

    def __init__(
        self,
        base_url: str,
        *,
        headers: t.Optional[t.Dict[str, str]] = None,
        timeout: float = 10.0,
        client: t.Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout, headers=headers or {})

    def _url(self, name: str) -> str:
        segments = []
        for segment in name.lstrip("/").split("/"):
            if segment in (".", ".."):
                # escaped so the client cannot collapse them into another path
                segments.append(segment.replace(".", "%2E"))
            else:
                segments.append(quote(segment, safe=""))
        return f"{self._base_url}/parameters/{'/'.join(segments)}"

    async def fetch(self, name: str) -> str:
        url = self._url(name)
        try:
            r = await self._client.get(url)
        except httpx.TransportError as exc:
            raise ParameterTransportError(f"GET {url} failed: {exc}", parameter_name=name) from exc

        if r.status_code == 404:
            raise ParameterNotFoundError(f"parameter {name!r} not found", parameter_name=name)
        if r.status_code in (401, 403):
            raise ParameterAccessDeniedError(f"GET {url} returned {r.status_code}", parameter_name=name)
        if r.status_code >= 400:
            raise ParameterFetchError(f"GET {url} returned {r.status_code}: {r.text[:200]}", parameter_name=name)

        try:
            body = r.json()
        except ValueError as exc:
            raise ParameterFetchError(f"GET {url} returned non-JSON body", parameter_name=name) from exc
        value = body.get("value") if isinstance(body, dict) else None
        if not isinstance(value, str):
            _logger.debug("Unexpected body for %s: %r", name, body)
            raise ParameterFetchError(f"GET {url} returned no string 'value'", parameter_name=name)
        return value

    async def aclose(self) -> None:
        await self._client.aclose()
