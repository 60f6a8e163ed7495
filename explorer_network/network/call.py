"""Call execution wrapper.

Runs a call thunk once and reports the outcome as a value: either the raw
response or a classified :class:`CallFailure`. Exceptions never leave
:func:`run_call` except cancellation, which always propagates.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from ..base.cancellation import CancellationToken, CancelledError
from ..base.errors import CallFailure, classify_exception
from ..base.interfaces import CallThunk
from ..base.models import CallResponse

T = TypeVar("T")


@dataclass(frozen=True)
class CallOutcome(Generic[T]):
    """Result of one thunk invocation; exactly one field is set."""

    response: Optional[CallResponse[T]] = None
    failure: Optional[CallFailure] = None

    @property
    def failed(self) -> bool:
        return self.failure is not None


async def run_call(call: CallThunk[T], token: CancellationToken) -> CallOutcome[T]:
    """Await ``call(token)`` and wrap the result or the classified exception."""
    try:
        response = await call(token)
    except (CancelledError, asyncio.CancelledError):
        raise
    except Exception as exc:  # noqa: BLE001 - every transport failure is classified
        return CallOutcome(failure=classify_exception(exc))
    return CallOutcome(response=response)


__all__ = ["CallOutcome", "run_call"]
