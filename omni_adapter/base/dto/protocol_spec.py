"""ProtocolSpec: the complete declarative wire contract for one provider."""
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import Field

from .balance_spec import BalanceSpec
from .body_fields import BodyFieldSpec
from .config_model import ConfigModel
from .model_listing_spec import ModelListingSpec
from .request_params import HeaderSpec, QueryParamSpec
from .response_spec import ResponseSpec
from .stream_spec import StreamSpec


class ProtocolSpec(ConfigModel):
    """How to build requests for, and read responses from, one provider.

    Attributes:
        method: HTTP method. Only POST and PUT carry a body.
        content_type: Value of the ``Content-Type`` header.
        url_template: Optional URL template overriding the provider endpoint.
        query_params: Query parameters applied after URL resolution.
        headers: Additional headers (applied after the content type).
        body_fields: Ordered body field specifications.
        response: Non-streaming extraction rules.
        stream: Optional streaming request/decoding rules.
        model_listing: Optional model listing endpoint description.
        balance: Optional account balance endpoint description.
    """

    method: Literal["GET", "POST", "PUT", "DELETE"] = "POST"
    content_type: str = "application/json"
    url_template: Optional[str] = None
    query_params: List[QueryParamSpec] = Field(default_factory=list)
    headers: List[HeaderSpec] = Field(default_factory=list)
    body_fields: List[BodyFieldSpec] = Field(default_factory=list)
    response: ResponseSpec
    stream: Optional[StreamSpec] = None
    model_listing: Optional[ModelListingSpec] = None
    balance: Optional[BalanceSpec] = None


__all__ = ["ProtocolSpec"]
