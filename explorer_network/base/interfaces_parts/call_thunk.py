"""Call thunk type: the caller-supplied remote invocation."""
from __future__ import annotations

from typing import Awaitable, Callable, TypeVar

from ..cancellation import CancellationToken
from ..models import CallResponse

T = TypeVar("T")

# The thunk receives the fetch's token so it can abort mid-call.
CallThunk = Callable[[CancellationToken], Awaitable[CallResponse[T]]]

__all__ = ["CallThunk"]
