"""HTTP utilities package.

Exposes pooled httpx clients and the authenticated JSON transport.
"""

from .client import get_httpx_client, close_all_clients
from .transport import Transport

__all__ = ["get_httpx_client", "close_all_clients", "Transport"]
