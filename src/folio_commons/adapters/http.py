"""HTTP adapter – async httpx client with error mapping.

Non-2xx responses and network failures surface as :class:`TransportError`,
timeouts as :class:`TransportTimeoutError`, so callers handle one hierarchy
regardless of what httpx raised.
"""
from __future__ import annotations

from typing import Any

import httpx

from folio_commons.kernel.errors import TransportError, TransportTimeoutError

__all__ = ["HttpClient", "HttpxHttpClient"]


class HttpxHttpClient:
    def __init__(self, base_url: str = "", timeout: float = 10.0, **kwargs: Any) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self._client.__aexit__(*exc_info)

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise TransportTimeoutError(method, url, f"{method} {url} timed out") from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise TransportError(method, url, f"{method} {url} returned HTTP {status}", status_code=status) from exc
        except httpx.HTTPError as exc:
            raise TransportError(method, url, f"{method} {url} failed: {exc}") from exc
        return response


HttpClient = HttpxHttpClient
