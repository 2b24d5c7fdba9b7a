"""ProviderStore Protocol (single-class module).

Read-only source of provider configurations. The adapter looks providers up
by id and never writes them back.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from ..dto import ProviderConfig


@runtime_checkable
class ProviderStore(Protocol):
    """Interface to look up provider configurations by id."""

    def get(self, provider_id: str) -> Optional[ProviderConfig]:
        """Return the provider with ``provider_id`` or ``None``."""
        ...

    def list(self) -> List[ProviderConfig]:
        """Return all known providers."""
        ...


__all__ = ["ProviderStore"]
