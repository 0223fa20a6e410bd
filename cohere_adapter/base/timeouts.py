"""Timeout configuration for adapter HTTP calls.

The adapter performs no retries and enforces no per-operation deadline of its
own; the only timeout in play is the one configured on the pooled
``httpx.Client``. This module is the single source for that value so no
numeric literals leak into call sites.

Supported environment variables (all optional, positive floats):
    PT_TIMEOUT_HTTP_SECONDS
    PT_TIMEOUT_CONNECT_SECONDS

Values are cached per process and re-read only when the variables change,
which lets tests adjust them at runtime via ``monkeypatch.setenv``.
"""
from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional

import httpx


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Read/write/pool timeout for a single request.
        connect_timeout_seconds: Timeout for establishing the TCP/TLS
            connection. Defaults to ``http_timeout_seconds`` when unset.
    """

    http_timeout_seconds: float = 60.0
    connect_timeout_seconds: Optional[float] = None

    def to_httpx(self) -> httpx.Timeout:
        """Return the equivalent :class:`httpx.Timeout`."""
        return httpx.Timeout(self.http_timeout_seconds, connect=self.connect_timeout_seconds or self.http_timeout_seconds)


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float | None) -> float | None:
    """Parse an environment variable as a positive float, else ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
        return val if val > 0 else default
    except ValueError:
        return default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join([os.getenv("PT_TIMEOUT_HTTP_SECONDS", ""), os.getenv("PT_TIMEOUT_CONNECT_SECONDS", "")])
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    http = _parse_env_float("PT_TIMEOUT_HTTP_SECONDS", 60.0)
    connect = _parse_env_float("PT_TIMEOUT_CONNECT_SECONDS", None)
    _CACHED = TimeoutConfig(http_timeout_seconds=float(http), connect_timeout_seconds=connect)
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
