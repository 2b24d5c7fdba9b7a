"""HTTP utilities: pooled httpx clients and the httpx transport."""

from .client import get_httpx_client, close_all_clients
from .transport import HttpxTransport

__all__ = ["get_httpx_client", "close_all_clients", "HttpxTransport"]
