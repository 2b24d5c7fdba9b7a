"""Query parameter and header specifications.

Both carry a literal ``value`` and an optional ``value_template``. When a
template is present it is resolved against ``{apiKey, model, endpoint}`` and
wins over the literal.
"""
from __future__ import annotations

from typing import Optional

from .config_model import ConfigModel


class QueryParamSpec(ConfigModel):
    """One query parameter appended to (or overwritten on) the request URL.

    Parameters whose final value is empty are skipped.
    """

    key: str
    value: str = ""
    value_template: Optional[str] = None


class HeaderSpec(ConfigModel):
    """One request header (e.g. ``Authorization: Bearer {apiKey}``)."""

    key: str
    value: str = ""
    value_template: Optional[str] = None


__all__ = ["QueryParamSpec", "HeaderSpec"]
