"""Request builder: ProtocolSpec + ProviderConfig + GenerationRequest → HttpRequest.

Build order:

1. URL: ``url_template`` (or the provider endpoint) resolved against
   ``{apiKey, model, endpoint}``; for streaming calls with a ``url_endpoint``
   signal the first ``from`` occurrence is replaced by ``to``; then the
   configured query parameters, then the streaming query parameter.
2. Headers: ``Content-Type`` followed by each configured header.
3. Body (POST/PUT only): body fields in declared order, each written at its
   path unless its computed value is absent (``None``/``MISSING``); for
   streaming calls with a ``body_field`` signal the signal value is written
   last so it overrides any earlier field at the same path.

The build is a pure computation; it performs no I/O.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..base.dto import (
    BodyFieldSignal,
    BodyFieldSpec,
    DynamicField,
    ProtocolSpec,
    ProviderConfig,
    QueryParamSignal,
    StaticField,
    TemplateField,
    UrlReplacementSignal,
    VisualStructureField,
)
from ..base.errors import ConfigurationError
from ..base.logging import get_logger, log_event
from ..base.log_support import LogContext
from ..base.models import GenerationRequest, HttpRequest
from .messages import build_messages, build_structured_messages
from .paths import MISSING, set_path
from .template import resolve, stringify

DEFAULT_TEMPERATURE = 0.7
MESSAGE_PATHS = ("messages", "contents")
SYSTEM_PATH = "system"
BODY_METHODS = ("POST", "PUT")

_LOG = get_logger("omni_adapter.protocol.request")


def connection_variables(provider: ProviderConfig, model: str) -> Dict[str, Any]:
    """Template variables available to URL, query parameter and header templates."""
    return {"apiKey": provider.api_key, "model": model, "endpoint": provider.endpoint}


def body_variables(provider: ProviderConfig, request: GenerationRequest, model: str) -> Dict[str, Any]:
    """Template variables available to body field templates and JSON structures."""
    return {
        "message": request.message,
        "model": model,
        "stream": request.stream,
        "apiKey": provider.api_key,
        "systemPrompt": request.system_prompt,
        "temperature": DEFAULT_TEMPERATURE if request.temperature is None else request.temperature,
    }


def _stream_signal(protocol: ProtocolSpec, provider: ProviderConfig, request: GenerationRequest, model: str):
    if not request.stream:
        return None
    if protocol.stream is None or not protocol.stream.enabled:
        raise ConfigurationError(
            message="streaming requested but the protocol does not enable streaming",
            provider=provider.id,
            model=model,
        )
    return protocol.stream.request


def build_url(
    protocol: ProtocolSpec,
    provider: ProviderConfig,
    model: str,
    signal: Any = None,
) -> str:
    """Resolve the request URL including query parameters."""
    variables = connection_variables(provider, model)
    url = stringify(resolve(protocol.url_template or provider.endpoint, variables))
    if isinstance(signal, UrlReplacementSignal):
        url = url.replace(signal.replace_from, signal.replace_to, 1)

    params: List[tuple] = []
    for spec in protocol.query_params:
        value = stringify(resolve(spec.value_template, variables)) if spec.value_template else spec.value
        if value:
            params.append((spec.key, value))
    if isinstance(signal, QueryParamSignal):
        params.append((signal.key, signal.value or "true"))
    if not params:
        return url

    parsed = httpx.URL(url)
    for key, value in params:
        parsed = parsed.copy_set_param(key, value)
    return str(parsed)


def build_headers(protocol: ProtocolSpec, provider: ProviderConfig, model: str) -> Dict[str, str]:
    """Content type first, then each configured header (templates resolved)."""
    variables = connection_variables(provider, model)
    headers = {"Content-Type": protocol.content_type}
    for spec in protocol.headers:
        headers[spec.key] = stringify(resolve(spec.value_template, variables)) if spec.value_template else spec.value
    return headers


def field_value(
    spec: BodyFieldSpec,
    provider: ProviderConfig,
    request: GenerationRequest,
    model: str,
) -> Any:
    """Compute one body field's value; ``None``/``MISSING`` means "omit"."""
    if isinstance(spec, StaticField):
        return spec.value
    if isinstance(spec, TemplateField):
        if not spec.template:
            return ""
        return resolve(spec.template, body_variables(provider, request, model))
    if isinstance(spec, DynamicField):
        if spec.path in MESSAGE_PATHS:
            return build_messages(request.history, request.message, request.system_prompt, spec.transform)
        if spec.path == SYSTEM_PATH and request.system_prompt:
            return request.system_prompt
        return spec.value
    if isinstance(spec, VisualStructureField):
        if spec.structure is None or not spec.structure.enabled:
            return []
        return build_structured_messages(
            request.history,
            request.message,
            request.system_prompt,
            spec.structure,
            body_variables(provider, request, model),
        )
    raise TypeError(f"unsupported body field: {type(spec).__name__}")


def build_body(
    protocol: ProtocolSpec,
    provider: ProviderConfig,
    request: GenerationRequest,
    model: str,
    signal: Any = None,
) -> Dict[str, Any]:
    """Assemble the JSON body from the declared fields."""
    body: Dict[str, Any] = {}
    for spec in protocol.body_fields:
        value = field_value(spec, provider, request, model)
        if value is None or value is MISSING:
            log_event(_LOG, "request.field.skip", level=logging.DEBUG, path=spec.path, kind=spec.kind)
            continue
        set_path(body, spec.path, value)
    if isinstance(signal, BodyFieldSignal):
        set_path(body, signal.path, True if signal.value is None else signal.value)
    return body


def build_request(
    protocol: Optional[ProtocolSpec],
    provider: ProviderConfig,
    request: GenerationRequest,
    model: Optional[str] = None,
) -> HttpRequest:
    """Build the transport-agnostic request for one generation call.

    Raises:
        ConfigurationError: no protocol, or streaming requested while the
            protocol's stream spec is absent or disabled.
    """
    if protocol is None:
        raise ConfigurationError(message="provider has no protocol configuration", provider=provider.id)
    model = model or request.model or provider.default_model or ""
    signal = _stream_signal(protocol, provider, request, model)
    url = build_url(protocol, provider, model, signal)
    headers = build_headers(protocol, provider, model)
    body = build_body(protocol, provider, request, model, signal) if protocol.method in BODY_METHODS else None
    log_event(
        _LOG,
        "request.build",
        LogContext(provider=provider.id, model=model),
        level=logging.DEBUG,
        url=url,
        method=protocol.method,
        stream=request.stream,
        body_keys=sorted(body) if body is not None else None,
    )
    return HttpRequest(url=url, method=protocol.method, headers=headers, body=body)


__all__ = [
    "build_request",
    "build_url",
    "build_headers",
    "build_body",
    "field_value",
    "connection_variables",
    "body_variables",
    "DEFAULT_TEMPERATURE",
]
