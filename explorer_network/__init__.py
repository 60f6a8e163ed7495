"""explorer_network package

Network-result wrapping layer for the comics explorer client.

Purpose:
    Run one asynchronous remote call, classify its outcome into a tri-state
    :class:`Resource` (success / error / loading), map transport failures to a
    stable numeric taxonomy (600-603) and honor cooperative cancellation.

Public API (re-exported):
    - Version: ``__version__``
    - Executor: :class:`NetworkWrapper`, ``PLACEHOLDER_MESSAGE``
    - Results: :class:`Resource`, :class:`Status`
    - Errors: :class:`TransportErrorCode`, :class:`ErrorKind`, :class:`UpstreamStatusError`
    - Hooks: :class:`FetchCallbacks`
    - Cancellation: :class:`CancellationToken`, :class:`CancelledError`
    - Composition: :func:`build_container`
"""

from .base.cancellation import CancellationToken, CancelledError
from .base.errors import ErrorKind, TransportErrorCode, UpstreamStatusError
from .base.interfaces import FetchCallbacks
from .base.models import Resource, Status
from .di import NetworkContainer, build_container
from .network import PLACEHOLDER_MESSAGE, NetworkWrapper

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "NetworkWrapper",
    "PLACEHOLDER_MESSAGE",
    "Resource",
    "Status",
    "TransportErrorCode",
    "ErrorKind",
    "UpstreamStatusError",
    "FetchCallbacks",
    "CancellationToken",
    "CancelledError",
    "NetworkContainer",
    "build_container",
]
