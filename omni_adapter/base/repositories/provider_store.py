"""In-memory implementation of ``ProviderStore``.

Holds validated ``ProviderConfig`` records keyed by id. Suitable for tests,
scripts and applications whose provider list comes from a configuration
file; durable stores live outside this package and only need to satisfy the
``ProviderStore`` protocol.

Thread safety: reads and writes are guarded by a lock; records themselves are
immutable pydantic models.
"""

from __future__ import annotations

from pathlib import Path
from threading import Lock
from typing import Dict, Iterable, List, Optional, Union

from ..dto import ProviderConfig


class InMemoryProviderStore:
    """Dictionary-backed provider store."""

    def __init__(self, providers: Iterable[ProviderConfig] = ()) -> None:
        self._providers: Dict[str, ProviderConfig] = {}
        self._lock = Lock()
        for provider in providers:
            self.save(provider)

    @classmethod
    def from_file(cls, path: Optional[Union[str, Path]] = None) -> "InMemoryProviderStore":
        """Build a store from a JSON/YAML config file (see ``omni_adapter.config``)."""
        from ...config import load_provider_configs  # local import: config depends on base

        return cls(load_provider_configs(path))

    def get(self, provider_id: str) -> Optional[ProviderConfig]:
        with self._lock:
            return self._providers.get(provider_id)

    def list(self) -> List[ProviderConfig]:
        with self._lock:
            return list(self._providers.values())

    def save(self, provider: ProviderConfig) -> None:
        """Insert or replace ``provider`` by id."""
        with self._lock:
            self._providers[provider.id] = provider

    def delete(self, provider_id: str) -> bool:
        """Remove ``provider_id``; returns whether it existed."""
        with self._lock:
            return self._providers.pop(provider_id, None) is not None

    def __contains__(self, provider_id: object) -> bool:
        with self._lock:
            return provider_id in self._providers

    def __len__(self) -> int:
        with self._lock:
            return len(self._providers)


__all__ = ["InMemoryProviderStore"]
