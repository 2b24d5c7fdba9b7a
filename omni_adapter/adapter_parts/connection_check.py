"""ConnectionCheck: outcome of ``ProtocolAdapter.test_connection``."""
from __future__ import annotations

from typing import NamedTuple

PROBE_MESSAGE = "This is a test message. Please reply briefly to confirm the connection works."
REPLY_PREVIEW_CHARS = 50
REASONING_PREVIEW_CHARS = 30


def preview(text: str, limit: int) -> str:
    """Return ``text`` cut to ``limit`` characters with an ellipsis when cut."""
    return text[:limit] + ("..." if len(text) > limit else "")


class ConnectionCheck(NamedTuple):
    """``(success, message)`` pair; unpacks like a plain tuple."""

    success: bool
    message: str


__all__ = [
    "ConnectionCheck",
    "PROBE_MESSAGE",
    "REPLY_PREVIEW_CHARS",
    "REASONING_PREVIEW_CHARS",
    "preview",
]
