"""Interfaces (Protocols) split into single-class modules."""

from .transport import ChunkCallback, EndCallback, ErrorCallback, Transport
from .provider_store import ProviderStore

__all__ = ["Transport", "ProviderStore", "ChunkCallback", "EndCallback", "ErrorCallback"]
