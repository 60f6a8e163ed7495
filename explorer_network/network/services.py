"""Comic API services built on pooled ``httpx.AsyncClient`` instances.

A service takes either a client or a zero-argument callable returning one;
the callable form is resolved on every request so a pool can hand out the
client bound to the running event loop.

Every method accepts the fetch's :class:`CancellationToken` and returns an
:class:`HttpCallResponse`, so a bound method call is directly usable as a call
thunk::

    await wrapper.fetch(lambda token: main_api.comic(614, token))

Non-2xx replies are returned, not raised, so their status codes reach the
failure hook. Transport exceptions propagate to the executor for
classification.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Optional, TypeVar, Union

import httpx

from ..base.cancellation import CancellationToken
from ..base.models import Comic, HttpCallResponse, SearchResults

T = TypeVar("T")

ClientSource = Union[httpx.AsyncClient, Callable[[], httpx.AsyncClient]]


class _ApiService:
    def __init__(self, client: ClientSource) -> None:
        if isinstance(client, httpx.AsyncClient):
            self._client_source: Callable[[], httpx.AsyncClient] = lambda: client
        else:
            self._client_source = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client_source()

    async def _get(
        self,
        path: str,
        token: CancellationToken,
        parser: Callable[[Any], T],
        params: Optional[Dict[str, Any]] = None,
    ) -> HttpCallResponse[T]:
        token.raise_if_cancelled()
        response = await self.client.get(path, params=params)
        token.raise_if_cancelled()
        return HttpCallResponse(response, parser)


class MainApiService(_ApiService):
    """Comic metadata endpoints (``info.0.json`` layout)."""

    async def current_comic(self, token: CancellationToken) -> HttpCallResponse[Comic]:
        return await self._get("info.0.json", token, Comic.model_validate)

    async def comic(self, number: int, token: CancellationToken) -> HttpCallResponse[Comic]:
        return await self._get(f"{number}/info.0.json", token, Comic.model_validate)


class SearchApiService(_ApiService):
    """Full-text comic search returning matching comic numbers."""

    def __init__(self, client: ClientSource, path: str = "search") -> None:
        super().__init__(client)
        self._path = path

    async def search(self, query: str, token: CancellationToken) -> HttpCallResponse[SearchResults]:
        return await self._get(self._path, token, SearchResults.model_validate, params={"q": query})


__all__ = ["ClientSource", "MainApiService", "SearchApiService"]
