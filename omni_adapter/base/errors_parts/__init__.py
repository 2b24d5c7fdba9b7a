"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `omni_adapter.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .adapter_error import AdapterError, ConfigurationError, TransportError
from .classification import classify_exception, code_for_status

__all__ = [
    "ErrorCode",
    "AdapterError",
    "ConfigurationError",
    "TransportError",
    "classify_exception",
    "code_for_status",
]
