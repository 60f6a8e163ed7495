"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose stable cancellation constructs via the canonical
``explorer_network.base.cancellation`` import path while the concrete
implementations live under ``cancellation_parts``.

Notes
-----
- ``CancellationToken`` carries a cancellation request from the caller into a
  fetch. Each fetch runs under ``token.child()``, a scope that the caller's
  cancel reaches but that cannot cancel the caller or sibling fetches.
- ``CancelledError`` is raised by operations that observe a cancellation request.
- ``checkpoint`` is the suspension point used by the fetch executor: it yields
  to the event loop (so a cancelled asyncio task unwinds there) and then polls
  the token.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken, checkpoint

__all__ = ["CancellationToken", "CancelledError", "checkpoint"]
