"""
Structured adapter error exception types.

`AdapterError` wraps failures with a normalized `ErrorCode` for consistent
handling and structured logging. Two specializations cover the failure
classes callers most often need to tell apart:

- `ConfigurationError`: the provider configuration cannot serve the call
  (no protocol spec, streaming disabled, no model). Fatal to the call.
- `TransportError`: non-2xx status or transport failure. Carries the raw
  status and body so callers can inspect what the provider returned.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class AdapterError(Exception):
    """Represents a structured adapter error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging and for
            surfacing to the caller.
        provider: Provider id where the error originated (e.g., ``"openai"``).
        model: Optional model name associated with the failure.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str = "unknown"
    model: Optional[str] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


@dataclass
class ConfigurationError(AdapterError):
    """Raised when a provider configuration cannot serve the requested call."""

    code: ErrorCode = ErrorCode.CONFIGURATION
    message: str = "invalid provider configuration"


@dataclass
class TransportError(AdapterError):
    """Raised for non-2xx responses and transport-level failures.

    ``status`` is ``0`` when no HTTP response was received at all.
    """

    code: ErrorCode = ErrorCode.TRANSPORT
    message: str = "transport failure"
    status: int = 0
    body: str = ""


__all__ = ["AdapterError", "ConfigurationError", "TransportError"]
