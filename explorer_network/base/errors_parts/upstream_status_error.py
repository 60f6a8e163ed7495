"""
Upstream protocol error carrying an explicit status code.

Raised by call thunks (or transport adapters) that prefer to signal a
non-success HTTP reply as an exception rather than returning the response.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class UpstreamStatusError(Exception):
    """The remote side answered with a protocol-level error status.

    Attributes:
        status_code: Status code reported by the upstream (e.g. ``502``).
        message: Optional human-readable detail.
    """

    status_code: int
    message: str = ""

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"upstream status {self.status_code}: {self.message}" if self.message else f"upstream status {self.status_code}"


__all__ = ["UpstreamStatusError"]
