"""Shared test doubles: a recording transport and an update recorder."""
from __future__ import annotations

import json
from typing import Any, Callable, List, Optional

from omni_adapter.base.cancellation import CancellationToken
from omni_adapter.base.models import HttpRequest, HttpResponse
from omni_adapter.base.streaming import StreamUpdate

StreamScript = Callable[..., None]


class FakeTransport:
    """Transport double recording every request.

    Non-streaming calls return ``responses`` in order (the last one repeats).
    Streaming calls deliver ``chunks`` then ``on_end`` unless ``stream_error``
    is set, or hand control to ``stream_script`` when provided.
    """

    def __init__(self, responses: Optional[List[HttpResponse]] = None) -> None:
        self.responses: List[HttpResponse] = list(responses or [])
        self.requests: List[HttpRequest] = []
        self.stream_requests: List[HttpRequest] = []
        self.chunks: List[str] = []
        self.stream_error: Optional[str] = None
        self.stream_script: Optional[StreamScript] = None
        self.tokens: List[Optional[CancellationToken]] = []

    def reply(self, payload: Any, status: int = 200) -> "FakeTransport":
        body = payload if isinstance(payload, str) else json.dumps(payload)
        self.responses.append(HttpResponse(status=status, body=body, success=200 <= status < 300))
        return self

    def send_request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        if not self.responses:
            return HttpResponse(status=0, success=False, error_text="no canned response")
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]

    def send_stream_request(self, request, on_chunk, on_end, on_error, *, cancellation_token=None) -> None:
        self.stream_requests.append(request)
        self.tokens.append(cancellation_token)
        if self.stream_script is not None:
            self.stream_script(self, on_chunk, on_end, on_error, cancellation_token)
            return
        for chunk in self.chunks:
            on_chunk(chunk)
        if self.stream_error is not None:
            on_error(self.stream_error)
        else:
            on_end()


class UpdateRecorder:
    """Callable collecting ``StreamUpdate`` emissions."""

    def __init__(self) -> None:
        self.updates: List[StreamUpdate] = []

    def __call__(self, update: StreamUpdate) -> None:
        self.updates.append(update)

    @property
    def terminals(self) -> List[StreamUpdate]:
        return [u for u in self.updates if u.done]

    @property
    def texts(self) -> List[str]:
        return [u.text for u in self.updates]
