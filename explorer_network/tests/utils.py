"""Shared test doubles for fetch executor tests.

Exports:
    - FakeResponse: minimal ``CallResponse`` implementation
    - Recorder: collects success / failure hook invocations
    - returning / raising: call thunk builders
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Tuple


@dataclass
class FakeResponse:
    """Minimal ``CallResponse`` implementation."""

    is_successful: bool
    code: int
    body: Any = None


class Recorder:
    """Collects hook invocations for assertions."""

    def __init__(self) -> None:
        self.successes: List[Any] = []
        self.failures: List[Tuple[str, int]] = []

    def on_success(self, body: Any) -> None:
        self.successes.append(body)

    def on_fail(self, message: str, code: int) -> None:
        self.failures.append((message, code))

    @property
    def silent(self) -> bool:
        return not self.successes and not self.failures


def returning(response: Any):
    """Build a call thunk that always returns ``response``."""

    async def _call(token):
        return response

    return _call


def raising(exc: BaseException):
    """Build a call thunk that always raises ``exc``."""

    async def _call(token):
        raise exc

    return _call
