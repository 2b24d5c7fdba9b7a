"""Unified adapter error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``omni_adapter.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.adapter_error import AdapterError, ConfigurationError, TransportError
from .errors_parts.classification import classify_exception, code_for_status

__all__ = [
    "ErrorCode",
    "AdapterError",
    "ConfigurationError",
    "TransportError",
    "classify_exception",
    "code_for_status",
]
