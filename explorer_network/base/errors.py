"""Transport error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``explorer_network.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import TransportErrorCode
from .errors_parts.error_kind import ErrorKind
from .errors_parts.call_failure import CallFailure
from .errors_parts.upstream_status_error import UpstreamStatusError
from .errors_parts.classification import classify_exception, error_code_for

__all__ = [
    "TransportErrorCode",
    "ErrorKind",
    "CallFailure",
    "UpstreamStatusError",
    "classify_exception",
    "error_code_for",
]
