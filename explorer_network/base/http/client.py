"""Async HTTP client pool.

Purpose:
    Share ``httpx.AsyncClient`` instances between the API services of one
    owner (normally a :class:`~explorer_network.di.NetworkContainer`) instead
    of allocating a client per call. Timeouts derive from
    :func:`get_timeout_config`.

Event loops:
    An ``AsyncClient``'s connection pool is bound to the event loop that first
    used it, so clients are keyed by ``(base_url, purpose, running loop)``.
    Each ``asyncio.run`` therefore gets fresh clients; entries whose loop has
    been closed are dropped on the next lookup.

Debug logging:
    With ``debug`` set, request/response event hooks log method, URL, status
    and a bounded excerpt of each body at DEBUG level (the equivalent of a
    body-level logging interceptor enabled only for debug builds).

Ownership:
    Settings (``debug``, ``transport``) belong to the pool, so two owners with
    different settings never share a client, and :meth:`AsyncClientPool.aclose`
    only closes the clients of its own pool.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Dict, List, Optional, Tuple

import httpx

from ...config.defaults import DEBUG_BODY_EXCERPT_CHARS
from ..logging import get_logger, log_event
from ..timeouts import get_timeout_config

_logger = get_logger("explorer_network.http")

_PoolKey = Tuple[Optional[str], str, asyncio.AbstractEventLoop]


def _excerpt(content: bytes, limit: int) -> str:
    text = content.decode("utf-8", errors="replace")
    return text if len(text) <= limit else text[:limit] + "...[truncated]"


class AsyncClientPool:
    """Lazily created clients keyed by base URL, purpose and event loop.

    Args:
        debug: Attach request/response logging hooks to created clients.
        transport: Optional transport for every client (tests pass
            ``httpx.MockTransport``). A shared transport must not hold
            loop-bound connections itself.
        body_excerpt_chars: Maximum body characters logged by debug hooks.
    """

    def __init__(
        self,
        *,
        debug: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        body_excerpt_chars: int = DEBUG_BODY_EXCERPT_CHARS,
    ) -> None:
        self._debug = debug
        self._transport = transport
        self._body_excerpt_chars = body_excerpt_chars
        self._clients: Dict[_PoolKey, httpx.AsyncClient] = {}
        self._lock = threading.RLock()

    @property
    def debug(self) -> bool:
        return self._debug

    def __len__(self) -> int:
        with self._lock:
            return len(self._clients)

    def get(self, base_url: Optional[str], purpose: str) -> httpx.AsyncClient:
        """Return the client for ``(base_url, purpose)`` on the running loop.

        Must be called from a coroutine; raises ``RuntimeError`` otherwise.
        """
        key = (base_url, purpose, asyncio.get_running_loop())
        with self._lock:
            self._drop_stale()
            client = self._clients.get(key)
            if client is None or client.is_closed:
                client = self._create(base_url)
                self._clients[key] = client
            return client

    async def aclose(self) -> None:
        """Close this pool's clients bound to the running loop.

        Clients of closed loops are discarded; clients of other live loops
        stay untouched since they can only be closed from their own loop.
        """
        loop = asyncio.get_running_loop()
        with self._lock:
            self._drop_stale()
            mine: List[httpx.AsyncClient] = [c for k, c in self._clients.items() if k[2] is loop]
            self._clients = {k: c for k, c in self._clients.items() if k[2] is not loop}
        for client in mine:
            await client.aclose()

    def _drop_stale(self) -> None:
        stale = [k for k, c in self._clients.items() if k[2].is_closed() or c.is_closed]
        for key in stale:
            del self._clients[key]

    def _create(self, base_url: Optional[str]) -> httpx.AsyncClient:
        hooks = {"request": [self._log_request], "response": [self._log_response]} if self._debug else {}
        return httpx.AsyncClient(
            base_url=base_url or "",
            timeout=get_timeout_config().to_httpx(),
            event_hooks=hooks,
            transport=self._transport,
        )

    async def _log_request(self, request: httpx.Request) -> None:
        try:
            body = _excerpt(request.content, self._body_excerpt_chars) or None
        except httpx.RequestNotRead:
            body = "<streaming>"
        log_event(
            _logger,
            "http.request",
            level=logging.DEBUG,
            method=request.method,
            url=str(request.url),
            body=body,
        )

    async def _log_response(self, response: httpx.Response) -> None:
        await response.aread()
        log_event(
            _logger,
            "http.response",
            level=logging.DEBUG,
            method=response.request.method,
            url=str(response.request.url),
            status=response.status_code,
            body=_excerpt(response.content, self._body_excerpt_chars) or None,
        )


__all__ = ["AsyncClientPool"]
