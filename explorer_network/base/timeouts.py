"""Centralized timeout values for the HTTP transport.

The fetch executor never imposes a deadline of its own: a stalled call
surfaces as a timeout exception raised by the transport, which the executor
classifies as ``SOCKET_TIMEOUT`` (601). The values here configure that
transport.

Supported environment variables (all optional, positive floats):
    EXPLORER_TIMEOUT_HTTP_SECONDS
    EXPLORER_TIMEOUT_CONNECT_SECONDS

The parsed configuration is cached per process and refreshed when the
relevant environment variables change (tests adjust them at runtime).
"""
from __future__ import annotations

import os
from dataclasses import dataclass

import httpx


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Read/write/pool budget for a single request.
        connect_timeout_seconds: Budget for establishing the connection.
    """

    http_timeout_seconds: float = 30.0
    connect_timeout_seconds: float = 10.0

    def to_httpx(self) -> httpx.Timeout:
        return httpx.Timeout(self.http_timeout_seconds, connect=self.connect_timeout_seconds)


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse an environment variable as a positive float, else ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(
        [
            os.getenv("EXPLORER_TIMEOUT_HTTP_SECONDS", ""),
            os.getenv("EXPLORER_TIMEOUT_CONNECT_SECONDS", ""),
        ]
    )
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED

    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float("EXPLORER_TIMEOUT_HTTP_SECONDS", 30.0),
        connect_timeout_seconds=_parse_env_float("EXPLORER_TIMEOUT_CONNECT_SECONDS", 10.0),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
