"""Structured logging context for adapter events.

``LogContext`` carries the correlation fields shared by every event of one
call (provider id, model, request id). ``redact_url`` strips query strings
from URLs before they are logged, since providers such as Gemini pass the API
key as a query parameter.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional
from urllib.parse import urlsplit, urlunsplit


@dataclass
class LogContext:
    """Structured context for adapter logging events."""

    provider: Optional[str] = None
    model: Optional[str] = None
    request_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


def redact_url(url: str) -> str:
    """Return ``url`` with any query string replaced by ``?<redacted>``."""
    parts = urlsplit(url)
    if not parts.query:
        return url
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "<redacted>", ""))


__all__ = ["LogContext", "redact_url"]
