"""Logging helpers (formatter, context, redaction) used by base.logging."""

from .json_formatter import JsonFormatter, ISO
from .logging_context import LogContext, redact_url

__all__ = ["JsonFormatter", "ISO", "LogContext", "redact_url"]
