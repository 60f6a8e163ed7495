"""Fetch executor, call execution wrapper and comic API services."""

from .call import CallOutcome, run_call
from .services import ClientSource, MainApiService, SearchApiService
from .wrapper import PLACEHOLDER_MESSAGE, NetworkWrapper

__all__ = [
    "CallOutcome",
    "run_call",
    "ClientSource",
    "MainApiService",
    "SearchApiService",
    "NetworkWrapper",
    "PLACEHOLDER_MESSAGE",
]
