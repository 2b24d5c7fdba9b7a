"""Transport Protocol (single-class module).

The adapter never opens sockets itself. A transport delivers a fully built
``HttpRequest`` and reports the outcome, either as one ``HttpResponse`` or as
a sequence of chunk callbacks ending in exactly one ``on_end`` or ``on_error``.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, runtime_checkable

from ..cancellation import CancellationToken
from ..models import HttpRequest, HttpResponse

ChunkCallback = Callable[[str], None]
EndCallback = Callable[[], None]
ErrorCallback = Callable[[str], None]


@runtime_checkable
class Transport(Protocol):
    """Interface for delivering adapter requests over the network."""

    def send_request(self, request: HttpRequest) -> HttpResponse:
        """Send ``request`` and return the complete response.

        Implementations must not raise for HTTP or network failures; they
        return ``success=False`` with ``status`` 0 when no response arrived.
        """
        ...

    def send_stream_request(
        self,
        request: HttpRequest,
        on_chunk: ChunkCallback,
        on_end: EndCallback,
        on_error: ErrorCallback,
        *,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> None:
        """Send ``request`` and deliver the body as raw text fragments.

        Callbacks are invoked in delivery order and the call returns only once
        the stream is over. Returning without ``on_end`` or ``on_error`` is
        reported to the caller as a stream error. ``cancellation_token`` lets
        implementations stop reading early; callers must not rely on it.
        """
        ...


__all__ = ["Transport", "ChunkCallback", "EndCallback", "ErrorCallback"]
