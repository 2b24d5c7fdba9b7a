"""Model listing: read a provider's available models from its listing endpoint.

The endpoint and headers may reference ``{apiKey}``. The model array is read
at ``response_path`` (the whole body when empty); each entry contributes an
id (``id_path``), an optional name and description. Entries without an id are
skipped, ids are filtered by ``filter_pattern`` (``re.search``) before a
leading ``models/`` prefix (Gemini style) is stripped.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional, Union

from ..base.dto import BalanceSpec, ModelListingSpec, ProviderConfig
from ..base.errors import AdapterError, ConfigurationError, ErrorCode, TransportError, code_for_status
from ..base.logging import get_logger, log_event, normalized_log_event
from ..base.log_support import LogContext
from ..base.models import HttpRequest, HttpResponse, ModelInfo
from ..base.interfaces import Transport
from .paths import get_path
from .response import extract_text, is_present, parse_json
from .template import stringify, substitute

MODELS_PREFIX = "models/"


def _listing_spec(provider: ProviderConfig) -> ModelListingSpec:
    spec = provider.protocol.model_listing if provider.protocol is not None else None
    if spec is None or not spec.enabled or not spec.endpoint:
        raise ConfigurationError(
            message="model listing is not enabled for this provider", provider=provider.id
        )
    return spec


def build_listing_request(provider: ProviderConfig, spec: Union[ModelListingSpec, BalanceSpec]) -> HttpRequest:
    """Resolve endpoint and headers of a listing (or balance) call."""
    variables = {"apiKey": provider.api_key}
    headers: Dict[str, str] = {"Content-Type": "application/json"}
    for header in spec.headers:
        value = substitute(header.value_template, variables) if header.value_template else header.value
        if value:
            headers[header.key] = value
    return HttpRequest(
        url=substitute(spec.endpoint, variables),
        method=spec.method,
        headers=headers,
    )


def raise_for_response(provider: ProviderConfig, response: HttpResponse) -> None:
    """Raise ``TransportError`` for a failed auxiliary call."""
    if response.success:
        return
    raise TransportError(
        code=code_for_status(response.status) if response.status else ErrorCode.TRANSPORT,
        message=f"HTTP {response.status}: {response.body or response.error_text or ''}",
        provider=provider.id,
        status=response.status,
        body=response.body,
    )


def parse_models(provider: ProviderConfig, spec: ModelListingSpec, data: Any) -> List[ModelInfo]:
    """Turn a parsed listing body into ``ModelInfo`` records."""
    entries = get_path(data, spec.response_path)
    if not isinstance(entries, list):
        raise AdapterError(
            code=ErrorCode.DECODE,
            message=f"model list at '{spec.response_path or '<root>'}' is not an array",
            provider=provider.id,
        )
    pattern = re.compile(spec.filter_pattern) if spec.filter_pattern else None
    models: List[ModelInfo] = []
    for entry in entries:
        raw_id = get_path(entry, spec.id_path)
        if not is_present(raw_id):
            continue
        model_id = stringify(raw_id)
        if pattern is not None and not pattern.search(model_id):
            continue
        if model_id.startswith(MODELS_PREFIX):
            model_id = model_id[len(MODELS_PREFIX):]
        name: Optional[str] = extract_text(entry, spec.name_path) if spec.name_path else None
        description = extract_text(entry, spec.description_path) if spec.description_path else None
        models.append(
            ModelInfo(id=model_id, name=name or model_id, provider=provider.id, description=description)
        )
    return models


def fetch_models(
    provider: ProviderConfig,
    transport: Transport,
    *,
    logger: Optional[logging.Logger] = None,
) -> List[ModelInfo]:
    """Fetch and parse the provider's model list.

    Raises:
        ConfigurationError: listing not configured or disabled.
        TransportError: non-2xx response or network failure.
        AdapterError: (``DECODE``) body is not JSON or holds no model array.
    """
    logger = logger or get_logger("omni_adapter.protocol.models")
    ctx = LogContext(provider=provider.id)
    spec = _listing_spec(provider)
    request = build_listing_request(provider, spec)
    log_event(logger, "models.fetch", ctx, level=logging.DEBUG, url=request.url, phase="start")
    response = transport.send_request(request)
    raise_for_response(provider, response)
    models = parse_models(provider, spec, parse_json(response.body))
    normalized_log_event(logger, "models.fetch", ctx, phase="finalize", emitted=True, count=len(models))
    return models


__all__ = ["fetch_models", "parse_models", "build_listing_request", "raise_for_response", "MODELS_PREFIX"]
