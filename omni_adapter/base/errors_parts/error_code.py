"""
Normalized adapter error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the request builder, the stream
decoder and the transport layer. Values are lowercase snake_case and are
considered a stable public contract for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    DECODE = "decode"
    CANCELLED = "cancelled"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    TRANSIENT = "transient"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
