"""
Network Base Package

Exports the transport-agnostic building blocks of the fetch pipeline:

- Models: the ``Resource`` result container and the raw response contract
- Errors: transport error codes, failure kinds and exception classification
- Interfaces: callback hooks and the call thunk type
- Cancellation: cooperative cancellation token and checkpoint
"""

from .cancellation import CancellationToken, CancelledError, checkpoint
from .errors import (
    CallFailure,
    ErrorKind,
    TransportErrorCode,
    UpstreamStatusError,
    classify_exception,
    error_code_for,
)
from .interfaces import CallThunk, FetchCallbacks, OnFail, OnSuccess
from .models import CallResponse, Comic, HttpCallResponse, Resource, SearchResults, Status
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    "CancellationToken",
    "CancelledError",
    "checkpoint",
    "CallFailure",
    "ErrorKind",
    "TransportErrorCode",
    "UpstreamStatusError",
    "classify_exception",
    "error_code_for",
    "CallThunk",
    "FetchCallbacks",
    "OnFail",
    "OnSuccess",
    "CallResponse",
    "Comic",
    "HttpCallResponse",
    "Resource",
    "SearchResults",
    "Status",
    "TimeoutConfig",
    "get_timeout_config",
]
