"""Model listing endpoint description used by ``fetch_models``."""
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import Field

from .config_model import ConfigModel
from .request_params import HeaderSpec


class ModelListingSpec(ConfigModel):
    """Where and how to read the provider's model list.

    Attributes:
        enabled: Listing is attempted only when set.
        endpoint: URL; ``{apiKey}`` is substituted.
        method: ``GET`` or ``POST``.
        headers: Header specs; templates may reference ``{apiKey}``.
        response_path: Path to the model array (empty: the body itself).
        id_path: Path to the id within each entry.
        name_path: Optional path to a display name.
        description_path: Optional path to a description.
        filter_pattern: Optional regex an id must match (searched, not anchored).
    """

    enabled: bool = True
    endpoint: str
    method: Literal["GET", "POST"] = "GET"
    headers: List[HeaderSpec] = Field(default_factory=list)
    response_path: str = ""
    id_path: str = "id"
    name_path: Optional[str] = None
    description_path: Optional[str] = None
    filter_pattern: Optional[str] = None


__all__ = ["ModelListingSpec"]
