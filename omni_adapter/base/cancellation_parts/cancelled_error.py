"""Cancellation error type.

Defines the public ``CancelledError`` used to signal cooperative cancellation
of an in-flight generation.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Distinguishes a user or supersede cancellation from real failures so that
    callers can suppress log noise or map it to a dedicated terminal update.
    """

__all__ = ["CancelledError"]
