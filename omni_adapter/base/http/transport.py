"""httpx-backed implementation of the ``Transport`` protocol.

``HttpxTransport`` is the shipped default. Tests and embedding applications
may pass their own ``httpx.Client`` (for example one built on
``httpx.MockTransport``); otherwise pooled clients from
:func:`get_httpx_client` are used, one per purpose.

Failure semantics:
- ``send_request`` never raises. Non-2xx responses come back with
  ``success=False``; network failures with ``status=0`` and ``error_text``.
- ``send_stream_request`` reports non-2xx responses and exceptions through
  ``on_error`` exactly once, otherwise calls ``on_end`` after the body is
  exhausted. When the cancellation token fires it stops reading and returns
  without further callbacks.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from ..cancellation import CancellationToken, CancelledError
from ..errors import classify_exception
from ..interfaces_parts.transport import ChunkCallback, EndCallback, ErrorCallback
from ..logging import get_logger, log_event
from ..models import HttpRequest, HttpResponse
from .client import get_httpx_client


class HttpxTransport:
    """Deliver adapter requests with httpx."""

    def __init__(self, client: Optional[httpx.Client] = None, *, logger: Optional[logging.Logger] = None) -> None:
        self._client = client
        self._logger = logger or get_logger("omni_adapter.http")

    def _client_for(self, purpose: str) -> httpx.Client:
        return self._client if self._client is not None else get_httpx_client(purpose)

    def send_request(self, request: HttpRequest) -> HttpResponse:
        try:
            resp = self._client_for("chat").request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body_text(),
            )
        except Exception as exc:  # noqa: BLE001 - transport boundary reports instead of raising
            code = classify_exception(exc)
            log_event(self._logger, "http.error", level=logging.WARNING, url=request.url, code=code.value, error=str(exc))
            return HttpResponse(status=0, success=False, error_text=str(exc) or type(exc).__name__)
        return HttpResponse(
            status=resp.status_code,
            body=resp.text,
            headers=dict(resp.headers),
            success=resp.is_success,
            error_text=None if resp.is_success else resp.reason_phrase,
        )

    def send_stream_request(
        self,
        request: HttpRequest,
        on_chunk: ChunkCallback,
        on_end: EndCallback,
        on_error: ErrorCallback,
        *,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> None:
        try:
            with self._client_for("stream").stream(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body_text(),
            ) as resp:
                if not resp.is_success:
                    resp.read()
                    on_error(f"HTTP {resp.status_code}: {resp.text}")
                    return
                for text in resp.iter_text():
                    if cancellation_token is not None:
                        cancellation_token.raise_if_cancelled()
                    if text:
                        on_chunk(text)
            if cancellation_token is not None:
                cancellation_token.raise_if_cancelled()
        except CancelledError as ce:
            log_event(self._logger, "http.cancelled", level=logging.DEBUG, url=request.url, reason=str(ce))
            return
        except Exception as exc:  # noqa: BLE001 - reported through on_error
            code = classify_exception(exc)
            log_event(self._logger, "http.error", level=logging.WARNING, url=request.url, code=code.value, error=str(exc))
            on_error(str(exc) or type(exc).__name__)
            return
        on_end()


__all__ = ["HttpxTransport"]
