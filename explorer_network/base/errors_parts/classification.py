"""
Error classification helpers mapping exceptions to failure kinds and codes.

Classification is type based; the first matching rule wins:

1. Upstream status errors (``UpstreamStatusError``, ``httpx.HTTPStatusError``).
2. Host name resolution failures (``socket.gaierror``, also when wrapped in an
   ``httpx.ConnectError``).
3. Connection could not be established (``httpx.ConnectError``,
   ``ConnectionRefusedError``). Resets and broken pipes on an established
   connection fall through to the catch-all.
4. Timeouts (``httpx.TimeoutException``, ``TimeoutError``, ``asyncio.TimeoutError``).
5. Everything else.
"""
from __future__ import annotations

import asyncio
import socket
from typing import Dict, Optional

import httpx

from .call_failure import CallFailure
from .error_code import TransportErrorCode
from .error_kind import ErrorKind
from .upstream_status_error import UpstreamStatusError


_KIND_CODES: Dict[ErrorKind, int] = {
    ErrorKind.UNREACHABLE: TransportErrorCode.CONNECT,
    ErrorKind.TIMEOUT: TransportErrorCode.SOCKET_TIMEOUT,
    ErrorKind.DNS_FAILURE: TransportErrorCode.UNKNOWN_HOST,
    ErrorKind.UNKNOWN: TransportErrorCode.EXCEPTION,
}


def _extract_status(exc: BaseException) -> Optional[int]:
    """Return the upstream status code carried by ``exc`` if it is a status error."""
    if isinstance(exc, UpstreamStatusError):
        return exc.status_code
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code
    return None


def _is_dns_failure(exc: BaseException) -> bool:
    """Walk the cause/context chain looking for a resolver error.

    httpx surfaces resolver errors as ``ConnectError`` raised from the
    underlying ``socket.gaierror``.
    """
    seen = set()
    cur: Optional[BaseException] = exc
    while cur is not None and id(cur) not in seen:
        if isinstance(cur, socket.gaierror):
            return True
        seen.add(id(cur))
        cur = cur.__cause__ or cur.__context__
    return False


def classify_exception(exc: BaseException) -> CallFailure:
    """Classify an exception into a :class:`CallFailure`."""
    message = str(exc)
    status = _extract_status(exc)
    if status is not None:
        return CallFailure(ErrorKind.UPSTREAM_STATUS, message, status_code=status, exc=exc)
    if isinstance(exc, (socket.gaierror, httpx.ConnectError)) and _is_dns_failure(exc):
        return CallFailure(ErrorKind.DNS_FAILURE, message, exc=exc)
    if isinstance(exc, (httpx.ConnectError, ConnectionRefusedError)):
        return CallFailure(ErrorKind.UNREACHABLE, message, exc=exc)
    if isinstance(exc, (httpx.TimeoutException, TimeoutError, asyncio.TimeoutError)):
        return CallFailure(ErrorKind.TIMEOUT, message, exc=exc)
    return CallFailure(ErrorKind.UNKNOWN, message, exc=exc)


def error_code_for(failure: CallFailure) -> int:
    """Return the numeric error code a :class:`CallFailure` maps to."""
    if failure.kind is ErrorKind.UPSTREAM_STATUS and failure.status_code is not None:
        return failure.status_code
    return int(_KIND_CODES.get(failure.kind, TransportErrorCode.EXCEPTION))


__all__ = [
    "classify_exception",
    "error_code_for",
    "_extract_status",
    "_KIND_CODES",
]
