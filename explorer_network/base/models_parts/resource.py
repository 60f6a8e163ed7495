"""
Resource value returned by every fetch.

A ``Resource`` is built exactly once per fetch attempt and never mutated.
Consumers branch on ``status``: ``SUCCESS`` carries ``data`` (which may be
``None`` when the remote body was empty), ``ERROR`` carries ``message`` and/or
``error_code``, and ``LOADING`` is a bare marker used by the view layer while a
fetch is in flight.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar

from .status import Status

T = TypeVar("T")


@dataclass(frozen=True)
class Resource(Generic[T]):
    """Immutable tri-state result container.

    Attributes:
        status: One of :class:`Status`; fixed at construction.
        data: Payload on success.
        message: Human-readable failure text on error.
        error_code: Transport code (600-603) or upstream status code on error.
    """

    status: Status
    data: Optional[T] = None
    message: Optional[str] = None
    error_code: Optional[int] = None

    @classmethod
    def success(cls, data: Optional[T]) -> "Resource[T]":
        return cls(Status.SUCCESS, data=data)

    @classmethod
    def error(cls, message: Optional[str] = None, error_code: Optional[int] = None) -> "Resource[T]":
        return cls(Status.ERROR, message=message, error_code=error_code)

    @classmethod
    def loading(cls) -> "Resource[T]":
        return cls(Status.LOADING)

    @property
    def is_success(self) -> bool:
        return self.status is Status.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status is Status.ERROR

    @property
    def is_loading(self) -> bool:
        return self.status is Status.LOADING

    def to_dict(self) -> Dict[str, Any]:
        """Return a shallow dictionary representation (``data`` is not serialized)."""
        return {
            "status": self.status.value,
            "data": self.data,
            "message": self.message,
            "error_code": self.error_code,
        }


__all__ = ["Resource"]
