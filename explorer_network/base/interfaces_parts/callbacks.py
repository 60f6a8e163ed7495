"""Success / failure hooks invoked by the fetch executor.

Both hooks run synchronously inside the fetch sequence and their return values
are ignored. At most one of them fires per fetch.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")

OnSuccess = Callable[[Optional[T]], Any]
OnFail = Callable[[str, int], Any]


@dataclass(frozen=True)
class FetchCallbacks(Generic[T]):
    """Optional hooks for one fetch; a missing hook is a no-op.

    ``on_fail`` may raise ``ValueError`` (e.g. while parsing a structured error
    body); the executor degrades that to a message-only error ``Resource``.
    """

    on_success: Optional[OnSuccess[T]] = None
    on_fail: Optional[OnFail] = None

    def notify_success(self, body: Optional[T]) -> None:
        if self.on_success is not None:
            self.on_success(body)

    def notify_fail(self, message: str, code: int) -> None:
        if self.on_fail is not None:
            self.on_fail(message, code)

    def merged(
        self,
        on_success: Optional[OnSuccess[T]] = None,
        on_fail: Optional[OnFail] = None,
    ) -> "FetchCallbacks[T]":
        """Return a copy where explicitly supplied hooks replace the stored ones."""
        return FetchCallbacks(
            on_success=on_success if on_success is not None else self.on_success,
            on_fail=on_fail if on_fail is not None else self.on_fail,
        )


__all__ = ["FetchCallbacks", "OnFail", "OnSuccess"]
