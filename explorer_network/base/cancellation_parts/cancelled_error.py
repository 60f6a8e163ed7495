"""Cancellation error type.

Defines the public ``CancelledError`` used to signal cooperative cancellation
of a fetch. Kept isolated to satisfy one-class-per-file policy.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when a fetch observes a cancelled token.

    Distinct from transport failures: the fetch executor never converts it
    into an error ``Resource`` and lets it unwind to the caller instead.
    """

__all__ = ["CancelledError"]
