"""Shared default HTTP clients for the adapter.

Purpose:
    Hand out one reusable ``httpx.Client`` per base URL so ``cohere.Client``
    values built without an explicit ``http_client`` have a transport.
    There is no pool sizing or eviction here; connection handling is left
    to ``httpx``. Timeouts derive exclusively from
    :func:`get_timeout_config`.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Credentials:
    - Pooled clients carry no authentication headers. Callers attach their
      own ``Authorization`` header per request, so two credentials targeting
      the same base URL can share a pool entry safely.

Lifecycle & cleanup:
    - Clients are cached by ``(base_url, purpose)``.
    - All clients are closed at interpreter exit via ``atexit``. Tests may
      call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

# Internal cache keyed by (base_url, purpose)
_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: API base URL the client is grouped under. The client is not
            bound to it; callers issue absolute URLs.
        purpose: A short string discriminating separate pools. Keep stable to
            maximize reuse.

    Returns:
        A reusable ``httpx.Client`` instance.

    Thread-safety:
        Safe for concurrent use; per-key creation is guarded by a re-entrant
        lock.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        client = httpx.Client(timeout=get_timeout_config().to_httpx())
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            try:
                c.close()
            except Exception:  # nosec B110 - best-effort shutdown
                pass
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
