"""Cooperative cancellation token and fetch checkpoints.

A caller usually owns one long-lived token per screen or view model; every
fetch runs under a *child* of it (see :meth:`CancellationToken.child`), so
cancelling the caller's token stops all fetches in flight while a thunk can
still cancel its own fetch without touching its siblings. Children detach from
their parent once the fetch finishes.
"""

from __future__ import annotations

import asyncio
from threading import Lock
from typing import Optional, Set

from .cancelled_error import CancelledError


class CancellationToken:
    """Cancellation flag shared by a caller, the fetch executor and the thunk.

    Cancelling a token cancels its attached children; a child created from an
    already cancelled parent starts cancelled.
    """

    def __init__(self) -> None:
        self._cancelled = False
        self._reason: Optional[str] = None
        self._parent: Optional[CancellationToken] = None
        self._children: Set[CancellationToken] = set()
        self._lock = Lock()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def reason(self) -> str | None:
        return self._reason

    @property
    def parent(self) -> "CancellationToken | None":
        return self._parent

    @property
    def active_children(self) -> int:
        """Number of attached child scopes (fetches currently in flight)."""
        with self._lock:
            return len(self._children)

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation; idempotent, the first reason wins."""
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            self._reason = reason
            children = list(self._children)
        for child in children:
            child.cancel(reason)

    def child(self) -> "CancellationToken":
        """Return a new token attached to this one (the scope of one fetch)."""
        scope = CancellationToken()
        scope._parent = self
        with self._lock:
            if not self._cancelled:
                self._children.add(scope)
                return scope
            reason = self._reason
        scope.cancel(reason)
        return scope

    def detach(self) -> None:
        """Stop receiving cancellation from the parent; safe to call twice."""
        parent = self._parent
        if parent is None:
            return
        with parent._lock:
            parent._children.discard(self)

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if token is cancelled."""
        if self._cancelled:
            raise CancelledError(self._reason or "fetch cancelled")

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"CancellationToken(cancelled={self._cancelled}, reason={self._reason!r})"


async def checkpoint(token: Optional[CancellationToken] = None) -> None:
    """Yield to the event loop, then poll ``token``.

    Awaiting ``asyncio.sleep(0)`` lets a pending ``Task.cancel()`` surface as
    ``asyncio.CancelledError`` here; a cancelled token raises
    :class:`CancelledError`.
    """
    await asyncio.sleep(0)
    if token is not None:
        token.raise_if_cancelled()


__all__ = ["CancellationToken", "checkpoint"]
