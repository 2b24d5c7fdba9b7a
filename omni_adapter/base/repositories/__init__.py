"""Provider store implementations."""

from .provider_store import InMemoryProviderStore

__all__ = ["InMemoryProviderStore"]
