"""Unified timeout configuration for the adapter transport.

Centralizes timeout values used by the pooled httpx clients so that no ad-hoc
numeric literals are scattered across call sites.

Supported environment variables (all optional, positive floats):
    OMNI_ADAPTER_CONNECT_TIMEOUT_SECONDS
    OMNI_ADAPTER_HTTP_TIMEOUT_SECONDS
    OMNI_ADAPTER_STREAM_TIMEOUT_SECONDS

The configuration is cached after first read and refreshed only when one of
the variables above changes, which keeps access side-effect free for tests
that monkeypatch the environment.
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
        connect_timeout_seconds: Time allowed to establish a connection.
        http_timeout_seconds: Read timeout for non-streaming calls.
        stream_timeout_seconds: Idle timeout between streamed fragments.
    """

    connect_timeout_seconds: float = 10.0
    http_timeout_seconds: float = 60.0
    stream_timeout_seconds: float = 120.0

    def for_purpose(self, purpose: str) -> httpx.Timeout:
        """Return an ``httpx.Timeout`` suited to a client purpose ("chat"/"stream")."""
        read = self.stream_timeout_seconds if purpose == "stream" else self.http_timeout_seconds
        return httpx.Timeout(read, connect=self.connect_timeout_seconds)


_ENV_NAMES = (
    "OMNI_ADAPTER_CONNECT_TIMEOUT_SECONDS",
    "OMNI_ADAPTER_HTTP_TIMEOUT_SECONDS",
    "OMNI_ADAPTER_STREAM_TIMEOUT_SECONDS",
)
_CACHED: Optional[TimeoutConfig] = None
_ENV_GUARD: Optional[str] = None


def _parse_env_float(name: str, default: float) -> float:
    """Read ``name`` as a positive float, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(os.getenv(name, "") for name in _ENV_NAMES)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        connect_timeout_seconds=_parse_env_float(_ENV_NAMES[0], defaults.connect_timeout_seconds),
        http_timeout_seconds=_parse_env_float(_ENV_NAMES[1], defaults.http_timeout_seconds),
        stream_timeout_seconds=_parse_env_float(_ENV_NAMES[2], defaults.stream_timeout_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
