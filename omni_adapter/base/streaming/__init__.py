"""Streaming primitives shared by the decoder and the adapter."""

from .stream_update import StreamUpdate, UpdateCallback
from .stream_metrics import StreamMetrics

__all__ = ["StreamUpdate", "UpdateCallback", "StreamMetrics"]
