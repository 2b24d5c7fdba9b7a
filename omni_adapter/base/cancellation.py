"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose stable cancellation constructs via the canonical
``omni_adapter.base.cancellation`` import path while the concrete
implementations live under ``cancellation_parts``.

Notes
-----
- ``CancellationToken`` enables cooperative cancellation signalling across
  streaming generations; ``on_cancel`` callbacks let the decoder emit its
  terminal update the moment a call is superseded.
- ``SingleFlight`` keeps at most one live token per adapter instance.
- ``CancelledError`` is raised by operations that observe a cancellation request.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken, CancelCallback
from .cancellation_parts.single_flight import SingleFlight, SUPERSEDED_REASON

__all__ = [
    "CancellationToken",
    "CancelCallback",
    "CancelledError",
    "SingleFlight",
    "SUPERSEDED_REASON",
]
