"""Fetch executor: wraps one remote call into a :class:`Resource`.

Sequence per fetch (no retries, single attempt)::

    checkpoint -> call(token) -> checkpoint -> classify -> hook -> Resource

* 2xx response: ``on_success(body)`` then ``Resource.success(body)``.
* Non-2xx response: ``on_fail(PLACEHOLDER_MESSAGE, code)`` then
  ``Resource.error(PLACEHOLDER_MESSAGE, code)``. A ``ValueError`` raised by
  ``on_fail`` degrades to ``Resource.error(str(exc))`` without a code.
* Exception from the call (or from a hook): classified, logged and returned as
  ``Resource.error(error_code=...)``; no hook is invoked for it.
* Cancellation (token or asyncio task) propagates and produces no Resource.

No generic parser for server error bodies exists, so the failure hook always
receives the placeholder message.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional, TypeVar

from ..base.cancellation import CancellationToken, CancelledError, checkpoint
from ..base.errors import CallFailure, classify_exception, error_code_for
from ..base.interfaces import CallThunk, FetchCallbacks, OnFail, OnSuccess
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import CallResponse, Resource
from .call import run_call

T = TypeVar("T")

PLACEHOLDER_MESSAGE = "msg"

_NO_CALLBACKS: FetchCallbacks = FetchCallbacks()


class NetworkWrapper:
    """Stateless fetch executor; one instance can serve concurrent fetches."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or get_logger("explorer_network.fetch")

    async def fetch(
        self,
        call: CallThunk[T],
        on_success: Optional[OnSuccess[T]] = None,
        on_fail: Optional[OnFail] = None,
        *,
        callbacks: Optional[FetchCallbacks[T]] = None,
        token: Optional[CancellationToken] = None,
        ctx: Optional[LogContext] = None,
    ) -> Resource[T]:
        """Run ``call`` once and return its :class:`Resource`.

        Args:
            call: Async thunk receiving the cancellation token and returning a
                :class:`CallResponse`.
            on_success: Hook receiving the body of a successful response.
            on_fail: Hook receiving ``(message, code)`` for a non-2xx response.
            callbacks: Hooks bundled as :class:`FetchCallbacks`; explicit
                ``on_success`` / ``on_fail`` arguments take precedence.
            token: Caller's cancellation token. The fetch runs under a child of
                it (a fresh token when omitted); that child is checked before
                and after the call, handed to the thunk, and detached from
                ``token`` when the fetch ends.
            ctx: Optional logging context merged into emitted events.

        Raises:
            CancelledError: ``token`` was cancelled at a checkpoint or mid-call.
            asyncio.CancelledError: the running task was cancelled.
        """
        hooks = (callbacks or _NO_CALLBACKS).merged(on_success, on_fail)
        scope = token.child() if token is not None else CancellationToken()
        try:
            return await self._fetch_in_scope(call, hooks, scope, ctx)
        finally:
            scope.detach()

    async def _fetch_in_scope(
        self,
        call: CallThunk[T],
        hooks: FetchCallbacks[T],
        scope: CancellationToken,
        ctx: Optional[LogContext],
    ) -> Resource[T]:
        await checkpoint(scope)

        outcome = await run_call(call, scope)
        if outcome.failure is not None:
            return self._on_exception(outcome.failure, ctx)

        try:
            await checkpoint(scope)
            response = outcome.response
            if response.is_successful:
                return self._on_succeed(response, hooks, ctx)
            return self._on_failed(response.code, hooks)
        except (CancelledError, asyncio.CancelledError):
            raise
        except Exception as exc:  # noqa: BLE001 - body parsing or hook fault
            return self._on_exception(classify_exception(exc), ctx)

    def _on_succeed(
        self, response: CallResponse[T], hooks: FetchCallbacks[T], ctx: Optional[LogContext]
    ) -> Resource[T]:
        body = response.body
        hooks.notify_success(body)
        normalized_log_event(
            self._logger, "fetch.completed", ctx, phase="fetch", level=logging.DEBUG, status=response.code
        )
        return Resource.success(body)

    @staticmethod
    def _on_failed(code: int, hooks: FetchCallbacks[T]) -> Resource[T]:
        try:
            hooks.notify_fail(PLACEHOLDER_MESSAGE, code)
        except ValueError as exc:
            return Resource.error(str(exc))
        return Resource.error(PLACEHOLDER_MESSAGE, error_code=code)

    def _on_exception(self, failure: CallFailure, ctx: Optional[LogContext]) -> Resource[T]:
        code = error_code_for(failure)
        normalized_log_event(
            self._logger,
            "fetch.failed",
            ctx,
            phase="fetch",
            error_code=code,
            level=logging.WARNING,
            kind=failure.kind.value,
            exc_type=failure.exc_type,
            detail=failure.message or None,
            exc_info=failure.exc,
        )
        return Resource.error(error_code=code)


__all__ = ["NetworkWrapper", "PLACEHOLDER_MESSAGE"]
