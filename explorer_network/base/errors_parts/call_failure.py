"""
Classified failure value for one call attempt.

Returned by the call execution wrapper instead of letting the original
exception escape; the fetch executor maps it to an error code.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_kind import ErrorKind


@dataclass(frozen=True)
class CallFailure:
    """Represents a classified call failure.

    Attributes:
        kind: Normalized :class:`ErrorKind` for the failure.
        message: Human-readable text taken from the exception.
        status_code: Upstream status code; set only for ``UPSTREAM_STATUS``.
        exc: Original exception for diagnostics.
    """

    kind: ErrorKind
    message: str = ""
    status_code: Optional[int] = None
    exc: Optional[BaseException] = None

    @property
    def exc_type(self) -> Optional[str]:
        return type(self.exc).__name__ if self.exc is not None else None


__all__ = ["CallFailure"]
