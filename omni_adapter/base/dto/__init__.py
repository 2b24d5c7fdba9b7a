"""Declarative configuration DTOs (pydantic v2).

These models describe providers and their wire protocols. They are validated
once at load time; the protocol modules read them but never mutate them.
"""

from .balance_spec import BalanceField, BalanceSpec
from .body_fields import (
    BodyFieldSpec,
    DynamicField,
    StaticField,
    TemplateField,
    VisualStructureField,
)
from .json_node import ArrayNode, JsonNode, LiteralNode, ObjectMember, ObjectNode, TemplateNode
from .message_specs import MessageFormat, MessageStructureSpec, MessageTransformSpec, RoleRemap
from .model_listing_spec import ModelListingSpec
from .protocol_spec import ProtocolSpec
from .provider_config import ProviderConfig
from .request_params import HeaderSpec, QueryParamSpec
from .response_spec import ResponseSpec
from .stream_spec import (
    BodyFieldSignal,
    QueryParamSignal,
    StreamResponseSpec,
    StreamSignal,
    StreamSpec,
    UrlReplacementSignal,
)

__all__ = [
    "ArrayNode",
    "BalanceField",
    "BalanceSpec",
    "BodyFieldSignal",
    "BodyFieldSpec",
    "DynamicField",
    "HeaderSpec",
    "JsonNode",
    "LiteralNode",
    "MessageFormat",
    "MessageStructureSpec",
    "MessageTransformSpec",
    "ModelListingSpec",
    "ObjectMember",
    "ObjectNode",
    "ProtocolSpec",
    "ProviderConfig",
    "QueryParamSignal",
    "QueryParamSpec",
    "ResponseSpec",
    "RoleRemap",
    "StaticField",
    "StreamResponseSpec",
    "StreamSignal",
    "StreamSpec",
    "TemplateField",
    "TemplateNode",
    "UrlReplacementSignal",
    "VisualStructureField",
]
