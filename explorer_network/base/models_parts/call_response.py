"""
Raw response contract consumed by the fetch executor.

``CallResponse`` is the minimal shape a call thunk must return. The
``HttpCallResponse`` adapter fulfils it for an ``httpx.Response``, parsing the
body only when the status is in the success range.
"""
from __future__ import annotations

from typing import Any, Callable, Generic, Optional, Protocol, TypeVar, runtime_checkable

import httpx

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class CallResponse(Protocol[T_co]):
    """Response returned by a call thunk."""

    @property
    def is_successful(self) -> bool: ...

    @property
    def code(self) -> int: ...

    @property
    def body(self) -> Optional[T_co]: ...


class HttpCallResponse(Generic[T]):
    """Adapt an ``httpx.Response`` to :class:`CallResponse`.

    Parameters:
        response: The underlying httpx response.
        parser: Converts decoded JSON into ``T``. When omitted the decoded JSON
            is returned as is. Empty bodies yield ``None`` without invoking the
            parser.
    """

    def __init__(self, response: httpx.Response, parser: Optional[Callable[[Any], T]] = None) -> None:
        self._response = response
        self._parser = parser

    @property
    def raw(self) -> httpx.Response:
        return self._response

    @property
    def is_successful(self) -> bool:
        return self._response.is_success

    @property
    def code(self) -> int:
        return self._response.status_code

    @property
    def body(self) -> Optional[T]:
        if not self.is_successful or not self._response.content:
            return None
        decoded = self._response.json()
        return self._parser(decoded) if self._parser is not None else decoded

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"HttpCallResponse(code={self.code}, url={str(self._response.request.url)!r})"


__all__ = ["CallResponse", "HttpCallResponse"]
