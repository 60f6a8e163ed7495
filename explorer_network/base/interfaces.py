"""
Callable contracts used by the fetch pipeline (public surface).

Re-exports the implementations under ``interfaces_parts``.
"""

from .interfaces_parts.callbacks import FetchCallbacks, OnFail, OnSuccess
from .interfaces_parts.call_thunk import CallThunk

__all__ = ["FetchCallbacks", "OnFail", "OnSuccess", "CallThunk"]
