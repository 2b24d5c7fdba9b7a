"""
ModelInfo DTO for model listings fetched from a provider.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ModelInfo:
    """A single model listing entry.

    Attributes:
        id: Model identifier as accepted by the provider (``models/`` prefix stripped).
        name: Human-friendly display name (falls back to ``id``).
        provider: Provider id owning the model.
        description: Optional description text.
    """

    id: str
    name: str
    provider: str
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the entry."""
        return asdict(self)


__all__ = ["ModelInfo"]
