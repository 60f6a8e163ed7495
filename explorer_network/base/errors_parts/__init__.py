"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `explorer_network.base.errors` for the stable surface.
"""

from .error_code import TransportErrorCode
from .error_kind import ErrorKind
from .call_failure import CallFailure
from .upstream_status_error import UpstreamStatusError
from .classification import classify_exception, error_code_for

__all__ = [
    "TransportErrorCode",
    "ErrorKind",
    "CallFailure",
    "UpstreamStatusError",
    "classify_exception",
    "error_code_for",
]
