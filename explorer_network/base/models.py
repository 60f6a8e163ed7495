"""
Domain models public surface.

This module re-exports the one-class-per-file implementations under
``explorer_network.base.models_parts``.
"""

from .models_parts.status import Status
from .models_parts.resource import Resource
from .models_parts.call_response import CallResponse, HttpCallResponse
from .models_parts.comic import Comic, SearchResults

__all__ = [
    "Status",
    "Resource",
    "CallResponse",
    "HttpCallResponse",
    "Comic",
    "SearchResults",
]
