"""
HttpRequest: the transport-agnostic request descriptor produced by the
request builder and consumed by any ``Transport`` implementation.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class HttpRequest:
    """Fully resolved outbound request.

    Attributes:
        url: Absolute URL including query parameters.
        method: HTTP method (upper-case).
        headers: Header mapping, including the content type.
        body: JSON body mapping, or ``None`` for methods without a body.
    """

    url: str
    method: str = "POST"
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[Dict[str, Any]] = None

    def body_text(self) -> Optional[str]:
        """Return the body serialized as compact JSON (``None`` when absent)."""
        if self.body is None:
            return None
        return json.dumps(self.body, ensure_ascii=False)


__all__ = ["HttpRequest"]
