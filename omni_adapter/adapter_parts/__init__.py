"""Adapter-facing result and handle types."""

from .connection_check import ConnectionCheck, PROBE_MESSAGE
from .stream_handle import StreamHandle

__all__ = ["ConnectionCheck", "PROBE_MESSAGE", "StreamHandle"]
