"""Shared HTTP client pool for the shipped transport.

Purpose:
    Provide a thread-safe pool of reusable ``httpx.Client`` instances so the
    transport does not allocate a client (and a connection pool) per call.
    Timeouts derive exclusively from :func:`get_timeout_config`.

Lifecycle:
    - Clients are cached by purpose ("chat", "stream", "models"). Distinct
      purposes get distinct read timeouts.
    - All clients are closed at interpreter exit via ``atexit``; tests may
      call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[str, httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(purpose: str) -> httpx.Client:
    """Return the pooled ``httpx.Client`` for ``purpose``.

    The first request for a purpose creates a client configured from
    :func:`get_timeout_config`; later requests reuse the same instance.
    """
    client = _CLIENTS.get(purpose)
    if client is not None:
        return client

    with _LOCK:
        client = _CLIENTS.get(purpose)
        if client is not None:
            return client
        client = httpx.Client(timeout=get_timeout_config().for_purpose(purpose))
        _CLIENTS[purpose] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for client in _CLIENTS.values():
            try:
                client.close()
            except (RuntimeError, OSError):  # nosec B110 - shutdown close errors are not actionable
                pass
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
