"""
Interfaces for the adapter's external collaborators.

Re-exports the Protocols under ``omni_adapter.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import (
    ChunkCallback,
    EndCallback,
    ErrorCallback,
    ProviderStore,
    Transport,
)

__all__ = ["Transport", "ProviderStore", "ChunkCallback", "EndCallback", "ErrorCallback"]
