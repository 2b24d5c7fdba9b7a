"""ProviderConfig: one configured provider (endpoint, credentials, protocol)."""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .config_model import ConfigModel
from .protocol_spec import ProtocolSpec


class ProviderConfig(ConfigModel):
    """A provider record as read from a ``ProviderStore``.

    Immutable; overrides produce copies via ``model_copy(update=...)``.

    Attributes:
        id: Stable provider id (``"openai"``, ``"my-proxy"``).
        name: Display name (defaults to ``id``).
        endpoint: Endpoint URL, also available to templates as ``{endpoint}``.
        api_key: API key, available to templates as ``{apiKey}``.
        models: Known model ids, in preference order.
        default_model: Model used when a request does not name one.
        protocol: Wire contract. ``None`` means the provider cannot be called.
    """

    id: str
    name: str = ""
    endpoint: str = ""
    api_key: str = ""
    models: List[str] = Field(default_factory=list)
    default_model: Optional[str] = None
    protocol: Optional[ProtocolSpec] = None

    @property
    def display_name(self) -> str:
        return self.name or self.id


__all__ = ["ProviderConfig"]
