"""omni_adapter.config.defaults
=============================

Built-in protocol presets for common provider API shapes.

Presets are plain data validated into ``ProtocolSpec`` on demand, so they are
exactly as expressive as a user-authored configuration file and can be
copied into one as a starting point. A provider entry in a configuration
file may name a preset (``preset: gemini``) instead of spelling out a
protocol.

Module Purpose
--------------
- Single import location for preset endpoints and protocol shapes (no I/O).
- ``preset_protocol(name)`` / ``preset_provider(name, ...)`` helpers.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Optional, Tuple

from ..base.dto import ProtocolSpec, ProviderConfig
from ..base.errors import ConfigurationError

ANTHROPIC_VERSION = "2023-06-01"
CLAUDE_DEFAULT_MAX_TOKENS = 4096

PRESET_ENDPOINTS: Dict[str, str] = {
    "openai": "https://api.openai.com/v1/chat/completions",
    "deepseek": "https://api.deepseek.com/chat/completions",
    "gemini": "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent",
    "claude": "https://api.anthropic.com/v1/messages",
}

PRESET_DEFAULT_MODELS: Dict[str, str] = {
    "openai": "gpt-4o-mini",
    "deepseek": "deepseek-chat",
    "gemini": "gemini-1.5-flash",
    "claude": "claude-3-5-sonnet-latest",
}

_BEARER_AUTH = [{"key": "Authorization", "value_template": "Bearer {apiKey}"}]


def _openai_style(
    listing_endpoint: str, filter_pattern: str, balance: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    preset: Dict[str, Any] = {
        "method": "POST",
        "content_type": "application/json",
        "headers": _BEARER_AUTH,
        "body_fields": [
            {"kind": "template", "path": "model", "template": "{model}"},
            {"kind": "dynamic", "path": "messages", "transform": {"format": "openai"}},
            {"kind": "template", "path": "temperature", "template": "{temperature}"},
        ],
        "response": {
            "content_path": "choices[0].message.content",
            "reasoning_path": "choices[0].message.reasoning_content",
            "error_message_path": "error.message",
        },
        "stream": {
            "enabled": True,
            "request": {"kind": "body_field", "path": "stream", "value": True},
            "response": {
                "format": "sse",
                "content_path": "choices[0].delta.content",
                "reasoning_path": "choices[0].delta.reasoning_content",
            },
        },
        "model_listing": {
            "endpoint": listing_endpoint,
            "headers": _BEARER_AUTH,
            "response_path": "data",
            "id_path": "id",
            "name_path": "id",
            "filter_pattern": filter_pattern,
        },
    }
    if balance is not None:
        preset["balance"] = balance
    return preset


_PRESETS: Dict[str, Dict[str, Any]] = {
    "openai": _openai_style(
        "https://api.openai.com/v1/models", "^(gpt-|o\\d|text-|davinci|curie|babbage|ada)"
    ),
    "deepseek": _openai_style(
        "https://api.deepseek.com/models",
        "^deepseek-",
        {
            "endpoint": "https://api.deepseek.com/user/balance",
            "headers": _BEARER_AUTH,
            "balance_path": "balance_infos[0].total_balance",
            "currency_path": "balance_infos[0].currency",
            "available_path": "is_available",
        },
    ),
    "gemini": {
        "method": "POST",
        "content_type": "application/json",
        "query_params": [{"key": "key", "value_template": "{apiKey}"}],
        "body_fields": [
            {"kind": "dynamic", "path": "contents", "transform": {"format": "gemini"}},
            {"kind": "template", "path": "generationConfig.temperature", "template": "{temperature}"},
        ],
        "response": {
            "content_path": "candidates[0].content.parts[0].text",
            "error_message_path": "error.message",
        },
        "stream": {
            "enabled": True,
            "request": {"kind": "url_endpoint", "from": ":generateContent", "to": ":streamGenerateContent"},
            "response": {"content_path": "candidates[0].content.parts[0].text"},
        },
        "model_listing": {
            "endpoint": "https://generativelanguage.googleapis.com/v1beta/models?key={apiKey}",
            "response_path": "models",
            "id_path": "name",
            "name_path": "displayName",
            "description_path": "description",
            "filter_pattern": "^models/(gemini-|chat-|text-)",
        },
    },
    "claude": {
        "method": "POST",
        "content_type": "application/json",
        "headers": [
            {"key": "x-api-key", "value_template": "{apiKey}"},
            {"key": "anthropic-version", "value": ANTHROPIC_VERSION},
        ],
        "body_fields": [
            {"kind": "template", "path": "model", "template": "{model}"},
            {"kind": "static", "path": "max_tokens", "value": CLAUDE_DEFAULT_MAX_TOKENS},
            {"kind": "dynamic", "path": "system"},
            {"kind": "dynamic", "path": "messages", "transform": {"format": "claude"}},
            {"kind": "template", "path": "temperature", "template": "{temperature}"},
        ],
        "response": {"content_path": "content[0].text", "error_message_path": "error.message"},
        "stream": {
            "enabled": True,
            "request": {"kind": "body_field", "path": "stream", "value": True},
            "response": {"format": "sse", "content_path": "delta.text"},
        },
    },
}

PRESET_NAMES: Tuple[str, ...] = tuple(_PRESETS)


def preset_data(name: str) -> Dict[str, Any]:
    """Return a deep copy of the raw preset mapping for ``name``."""
    key = (name or "").strip().lower()
    if key not in _PRESETS:
        raise ConfigurationError(message=f"unknown protocol preset '{name}'; known: {', '.join(PRESET_NAMES)}")
    return copy.deepcopy(_PRESETS[key])


def preset_protocol(name: str) -> ProtocolSpec:
    """Return the validated ``ProtocolSpec`` for preset ``name``."""
    return ProtocolSpec.model_validate(preset_data(name))


def preset_provider(
    name: str,
    *,
    provider_id: Optional[str] = None,
    api_key: str = "",
    model: Optional[str] = None,
    endpoint: Optional[str] = None,
) -> ProviderConfig:
    """Build a ready-to-use ``ProviderConfig`` from preset ``name``."""
    key = (name or "").strip().lower()
    protocol = preset_protocol(key)
    default_model = model or PRESET_DEFAULT_MODELS[key]
    return ProviderConfig(
        id=provider_id or key,
        name=provider_id or key,
        endpoint=endpoint or PRESET_ENDPOINTS[key],
        api_key=api_key,
        models=[default_model],
        default_model=default_model,
        protocol=protocol,
    )


__all__ = [
    "ANTHROPIC_VERSION",
    "PRESET_ENDPOINTS",
    "PRESET_DEFAULT_MODELS",
    "PRESET_NAMES",
    "preset_data",
    "preset_protocol",
    "preset_provider",
]
