"""
HttpResponse: result of a non-streaming transport call.

Transports never raise for HTTP or network failures; they report them here
with ``success`` False and, for network failures, ``status`` 0.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class HttpResponse:
    """Status, headers and raw body text of a completed call."""

    status: int
    body: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    success: bool = True
    error_text: Optional[str] = None


__all__ = ["HttpResponse"]
