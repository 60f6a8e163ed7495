"""Tri-state status for :class:`Resource`."""
from __future__ import annotations

from enum import Enum


class Status(str, Enum):
    """Outcome marker of a fetch attempt."""

    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


__all__ = ["Status"]
