"""
Normalized failure kinds produced by exception classification.

Values are lowercase snake_case and double as the ``kind`` field of
``fetch.failed`` log events.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Enumerated failure kinds for a single call attempt."""

    UPSTREAM_STATUS = "upstream_status"
    UNREACHABLE = "unreachable"
    TIMEOUT = "timeout"
    DNS_FAILURE = "dns_failure"
    UNKNOWN = "unknown"


__all__ = ["ErrorKind"]
