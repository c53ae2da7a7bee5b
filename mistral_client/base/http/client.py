"""Process-wide pool of ``httpx.Client`` instances.

A ``MistralClient`` built without its own ``http_client`` borrows one from
here, so clients pointed at the same base URL share a connection pool. Pool
entries are keyed by ``(base_url, purpose)``; a client closed by its user is
replaced on the next lookup. Everything still open is closed at exit.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import httpx_timeout

_PoolKey = Tuple[Optional[str], str]

_pool: Dict[_PoolKey, httpx.Client] = {}
_pool_lock = threading.Lock()


def _new_client(base_url: Optional[str]) -> httpx.Client:
    kwargs = {"timeout": httpx_timeout()}
    if base_url:
        kwargs["base_url"] = base_url
    return httpx.Client(**kwargs)


def get_httpx_client(base_url: Optional[str], purpose: str = "api") -> httpx.Client:
    """Return the pooled client for ``base_url``, creating it if needed.

    The client carries the default request timeout; the transport passes a
    stream timeout per request where one applies.
    """
    key: _PoolKey = (base_url, purpose)
    with _pool_lock:
        client = _pool.get(key)
        if client is None or client.is_closed:
            client = _pool[key] = _new_client(base_url)
        return client


def close_all_clients() -> None:
    """Close every pooled client and empty the pool."""
    with _pool_lock:
        clients = list(_pool.values())
        _pool.clear()
    for client in clients:
        client.close()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
