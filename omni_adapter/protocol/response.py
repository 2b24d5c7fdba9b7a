"""Non-streaming response extraction and error message recovery."""
from __future__ import annotations

import json
from typing import Any, Optional

from ..base.dto import ResponseSpec
from ..base.errors import AdapterError, ErrorCode
from ..base.models import HttpResponse
from .paths import MISSING, get_path
from .template import stringify


def is_present(value: Any) -> bool:
    """Whether an extracted value counts as content (not absent, null or "")."""
    return value is not MISSING and value is not None and value != ""


def parse_json(text: str) -> Any:
    """Parse a response body, raising a ``DECODE`` ``AdapterError`` on failure."""
    try:
        return json.loads(text)
    except ValueError as exc:
        raise AdapterError(code=ErrorCode.DECODE, message=f"invalid JSON response: {exc}", raw=exc) from exc


def extract_text(data: Any, path: Optional[str]) -> Optional[str]:
    """Return the text at ``path`` or ``None`` when absent/empty."""
    if not path:
        return None
    value = get_path(data, path)
    return stringify(value) if is_present(value) else None


def extract_content(data: Any, spec: ResponseSpec) -> str:
    """Reply text at ``spec.content_path`` ("" when absent)."""
    return extract_text(data, spec.content_path) or ""


def extract_reasoning(data: Any, spec: ResponseSpec) -> Optional[str]:
    """Reasoning text at ``spec.reasoning_path`` when configured and present."""
    return extract_text(data, spec.reasoning_path)


def error_message(response: HttpResponse, spec: Optional[ResponseSpec]) -> str:
    """Build the caller-facing message for a failed call.

    The provider's own message at ``error_message_path`` wins when the body
    parses and the path resolves; otherwise status and raw body are reported.
    """
    if spec is not None and spec.error_message_path and response.body:
        try:
            parsed = json.loads(response.body)
        except ValueError:
            parsed = MISSING
        message = extract_text(parsed, spec.error_message_path) if parsed is not MISSING else None
        if message:
            return f"API error: {message}"
    detail = response.body or response.error_text or ""
    return f"API error: {response.status} - {detail}"


__all__ = [
    "is_present",
    "parse_json",
    "extract_text",
    "extract_content",
    "extract_reasoning",
    "error_message",
]
