"""omni_adapter.config.env
=========================

Environment variable conventions for provider overrides.

For a provider id ``my-proxy`` the prefix is ``MY_PROXY`` (upper-cased,
non-alphanumerics replaced by ``_``) and the recognized variables are:

- ``MY_PROXY_API_KEY``  → ``api_key``
- ``MY_PROXY_MODEL``    → ``default_model``
- ``MY_PROXY_ENDPOINT`` → ``endpoint``

Values that look like placeholders (``is_placeholder``) are ignored so that
committed ``.env`` templates never clobber real configuration.
"""

from __future__ import annotations

import os
import re
from typing import Dict, Optional

ENV_FIELD_MAP: Dict[str, str] = {
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "default_model": "MODEL",
    "endpoint": "ENDPOINT",
}

CONFIG_FILE_ENV = "OMNI_ADAPTER_CONFIG_FILE"

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the value looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_' (case-insensitive, surrounding spaces ignored).
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def env_prefix(provider_id: str) -> str:
    """Return the environment variable prefix for ``provider_id``."""
    return _NON_ALNUM.sub("_", provider_id or "").upper()


def env_overrides(provider_id: str) -> Dict[str, str]:
    """Collect non-empty, non-placeholder overrides for ``provider_id``."""
    prefix = env_prefix(provider_id)
    out: Dict[str, str] = {}
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val and not is_placeholder(val):
            out[field] = val
    return out


__all__ = [
    "ENV_FIELD_MAP",
    "CONFIG_FILE_ENV",
    "is_placeholder",
    "env_prefix",
    "env_overrides",
]
