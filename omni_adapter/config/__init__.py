"""Configuration layer for provider records.

Goals
-----
* Load provider configurations from one external file (JSON or YAML).
* Merge sources in a predictable order (later wins):
    1. Preset (when an entry names ``preset``)
    2. The entry itself
    3. Environment variables (``<ID>_API_KEY``, ``<ID>_MODEL``, ``<ID>_ENDPOINT``)
* Validate everything into ``ProviderConfig`` models once, at load time.

External Config File
--------------------
``load_provider_configs(path)`` reads ``path`` or, when omitted, the file
named by ``OMNI_ADAPTER_CONFIG_FILE``. JSON is tried first, then YAML.
Structure example:

```
providers:
  - id: gemini
    preset: gemini
    # api_key comes from GEMINI_API_KEY
  - id: my-proxy
    endpoint: https://proxy.internal/v1/chat
    defaultModel: llama-3
    protocol:
      response: {contentPath: "choices[0].message.content"}
```

A bare list of provider entries is accepted as well.

Public API
----------
* load_provider_configs(path=None) -> list[ProviderConfig]
* parse_provider_entries(data) -> list[ProviderConfig]
* apply_env_overrides(config) -> ProviderConfig
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from ..base.dto import ProviderConfig
from ..base.errors import ConfigurationError
from ..base.logging import get_logger, log_event
from .defaults import PRESET_DEFAULT_MODELS, PRESET_ENDPOINTS, preset_protocol, preset_provider
from .env import CONFIG_FILE_ENV, env_overrides, is_placeholder

_LOG = get_logger("omni_adapter.config")


def _read_document(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    try:
        return json.loads(text)
    except ValueError:
        pass
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(message=f"config file {path} is neither JSON nor YAML: {exc}", raw=exc) from exc


def _entries(data: Any) -> List[Any]:
    if data is None:
        return []
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("providers"), list):
        return data["providers"]
    raise ConfigurationError(message="config must be a list of providers or a mapping with a 'providers' list")


def _expand_preset(entry: Dict[str, Any]) -> Dict[str, Any]:
    """Fill protocol/endpoint/model defaults from the entry's ``preset``."""
    merged = dict(entry)
    name = merged.pop("preset", None)
    if not name:
        return merged
    key = str(name).strip().lower()
    protocol = preset_protocol(key)
    if merged.get("protocol") is None:
        merged["protocol"] = protocol
    if not merged.get("endpoint"):
        merged["endpoint"] = PRESET_ENDPOINTS[key]
    default_model = merged.get("default_model") or merged.get("defaultModel")
    if not default_model:
        merged["default_model"] = PRESET_DEFAULT_MODELS[key]
    return merged


def apply_env_overrides(config: ProviderConfig) -> ProviderConfig:
    """Return ``config`` with environment overrides applied (placeholders skipped)."""
    overrides = env_overrides(config.id)
    if not overrides:
        return config
    return config.model_copy(update=overrides)


def parse_provider_entries(data: Any) -> List[ProviderConfig]:
    """Validate raw provider entries (list or ``{"providers": [...]}``)."""
    configs: List[ProviderConfig] = []
    for index, entry in enumerate(_entries(data)):
        if not isinstance(entry, dict):
            raise ConfigurationError(message=f"provider entry #{index} is not a mapping")
        try:
            config = ProviderConfig.model_validate(_expand_preset(entry))
        except ValidationError as exc:
            raise ConfigurationError(
                message=f"invalid provider entry #{index}: {exc.error_count()} validation error(s)",
                provider=str(entry.get("id", "unknown")),
                raw=exc,
            ) from exc
        if is_placeholder(config.api_key):
            config = config.model_copy(update={"api_key": ""})
        configs.append(apply_env_overrides(config))
    return configs


def load_provider_configs(path: Optional[Union[str, Path]] = None) -> List[ProviderConfig]:
    """Load and validate provider configurations from a JSON/YAML file.

    With no ``path`` the ``OMNI_ADAPTER_CONFIG_FILE`` variable is consulted;
    when it is unset or points at a missing file an empty list is returned.
    An explicit ``path`` that does not exist raises ``ConfigurationError``.
    """
    explicit = path is not None
    raw_path = path if explicit else os.getenv(CONFIG_FILE_ENV)
    if not raw_path:
        return []
    file_path = Path(raw_path).expanduser()
    if not file_path.is_file():
        if explicit:
            raise ConfigurationError(message=f"config file not found: {file_path}")
        return []
    configs = parse_provider_entries(_read_document(file_path))
    log_event(_LOG, "config.load", path=str(file_path), providers=[c.id for c in configs])
    return configs


__all__ = [
    "load_provider_configs",
    "parse_provider_entries",
    "apply_env_overrides",
    "preset_protocol",
    "preset_provider",
    "is_placeholder",
]
