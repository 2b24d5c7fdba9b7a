"""Account balance: read a provider's remaining credit from its balance endpoint.

The request is built like a model listing call (``{apiKey}`` in endpoint and
header templates). Every configured path is read from the whole body;
``response_path`` only selects what is reported as ``raw``. Configured
``response_fields`` take precedence over the fixed balance/currency/available
paths.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from ..base.dto import BalanceSpec, ProviderConfig
from ..base.errors import ConfigurationError
from ..base.interfaces import Transport
from ..base.log_support import LogContext
from ..base.logging import get_logger, log_event, normalized_log_event
from ..base.models import BalanceInfo
from .model_listing import build_listing_request, raise_for_response
from .paths import MISSING, get_path
from .response import parse_json


def _balance_spec(provider: ProviderConfig) -> BalanceSpec:
    spec = provider.protocol.balance if provider.protocol is not None else None
    if spec is None or not spec.enabled or not spec.endpoint:
        raise ConfigurationError(message="balance lookup is not enabled for this provider", provider=provider.id)
    return spec


def _value(data: Any, path: Optional[str]) -> Any:
    if not path:
        return None
    found = get_path(data, path)
    return None if found is MISSING else found


def parse_balance(provider: ProviderConfig, spec: BalanceSpec, data: Any) -> BalanceInfo:
    """Turn a parsed balance body into a ``BalanceInfo``."""
    raw = _value(data, spec.response_path) if spec.response_path else data
    paths = [f.field_path for f in spec.response_fields if f.field_path]
    if paths:
        return BalanceInfo(provider=provider.id, raw=raw, fields={p: _value(data, p) for p in paths})
    return BalanceInfo(
        provider=provider.id,
        raw=raw,
        balance=_value(data, spec.balance_path),
        currency=_value(data, spec.currency_path),
        is_available=_value(data, spec.available_path),
    )


def fetch_balance(
    provider: ProviderConfig,
    transport: Transport,
    *,
    logger: Optional[logging.Logger] = None,
) -> BalanceInfo:
    """Fetch and parse the provider's account balance.

    Raises:
        ConfigurationError: balance lookup not configured or disabled.
        TransportError: non-2xx response or network failure.
        AdapterError: (``DECODE``) body is not JSON.
    """
    logger = logger or get_logger("omni_adapter.protocol.balance")
    ctx = LogContext(provider=provider.id)
    spec = _balance_spec(provider)
    request = build_listing_request(provider, spec)
    log_event(logger, "balance.fetch", ctx, level=logging.DEBUG, url=request.url, phase="start")
    response = transport.send_request(request)
    raise_for_response(provider, response)
    info = parse_balance(provider, spec, parse_json(response.body))
    normalized_log_event(
        logger,
        "balance.fetch",
        ctx,
        phase="finalize",
        emitted=True,
        balance=info.balance,
        currency=info.currency,
    )
    return info


__all__ = ["fetch_balance", "parse_balance"]
