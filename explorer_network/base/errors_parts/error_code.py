"""
Reserved numeric codes for failures below the HTTP layer.

These values sit outside the HTTP status range on purpose so callers can tell
a transport failure apart from an upstream status code carried in the same
``error_code`` field. They are a stable public contract.
"""
from __future__ import annotations

from enum import IntEnum


class TransportErrorCode(IntEnum):
    """Numeric codes for transport failures that never reached a server reply."""

    CONNECT = 600  # no network path (connection refused / unreachable)
    SOCKET_TIMEOUT = 601  # time budget exceeded
    UNKNOWN_HOST = 602  # host name could not be resolved
    EXCEPTION = 603  # anything else; worth investigating


__all__ = ["TransportErrorCode"]
