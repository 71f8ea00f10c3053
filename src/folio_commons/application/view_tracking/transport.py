"""View tracking – transports that deliver one flushed batch."""
from __future__ import annotations

from typing import Callable, Protocol, Sequence, runtime_checkable

from folio_commons.adapters.http import HttpxHttpClient
from folio_commons.application.view_tracking.item import VIEW_API_URL, ViewItem

__all__ = ["HttpViewTransport", "TokenProvider", "ViewTransport"]

TokenProvider = Callable[[], "str | None"]


@runtime_checkable
class ViewTransport(Protocol):
    """Port: deliver one batch of views. Raising signals a failed flush."""

    async def send(self, items: Sequence[ViewItem]) -> None: ...


class HttpViewTransport:
    """POST ``{"items": [...]}`` as JSON to the view report endpoint.

    The bearer token is read from *token_provider* on every send and the
    ``Authorization`` header is omitted when it returns nothing. With
    ``owns_client`` the client is closed by :meth:`aclose`; a client handed in
    by the caller is left open.
    """

    def __init__(
        self,
        client: HttpxHttpClient,
        *,
        url: str = VIEW_API_URL,
        token_provider: TokenProvider | None = None,
        owns_client: bool = False,
    ) -> None:
        self._client = client
        self._url = url
        self._token_provider = token_provider
        self._owns_client = owns_client

    @property
    def url(self) -> str:
        return self._url

    @property
    def client(self) -> HttpxHttpClient:
        return self._client

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = self._token_provider() if self._token_provider is not None else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def send(self, items: Sequence[ViewItem]) -> None:
        await self._client.post(
            self._url,
            json={"items": [item.to_dict() for item in items]},
            headers=self._headers(),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
