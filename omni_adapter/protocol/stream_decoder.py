"""Streaming response decoder.

One ``StreamDecoder`` lives for exactly one streaming call and moves through

    OPEN → (feed)* → DONE | ERROR | CANCELLED

Terminal states are final and mutually exclusive: once one is reached, later
``feed``/``finish``/``fail``/``cancel`` calls are ignored, so the caller sees
exactly one ``done=True`` update.

Each fragment handed to ``feed`` is decoded on its own, never buffered:

* SSE (``format="sse"``, or unset and the fragment contains ``data:``): one
  JSON object per ``<data_prefix>`` line; blank lines and the
  ``<data_prefix><finish_sentinel>`` line are ignored.
* JSON array (``format="json"``, or unset otherwise): the fragment is split on
  commas preceding ``{`` and each trimmed ``{...}`` piece parsed separately.

Pieces that fail to parse are skipped (boundary-split objects are expected).
Content and reasoning are accumulated and every emission carries the whole
text so far.
"""
from __future__ import annotations

import json
import logging
import re
import threading
from enum import Enum
from typing import Any, Iterator, Optional

from ..base.dto import StreamResponseSpec
from ..base.errors import ErrorCode
from ..base.logging import get_logger, log_event, normalized_log_event
from ..base.log_support import LogContext
from ..base.streaming import StreamMetrics, StreamUpdate, UpdateCallback
from .paths import get_path
from .response import is_present
from .template import stringify

CANCELLED_MESSAGE = "generation cancelled"
STREAM_ERROR_PREFIX = "stream request error: "

_OBJECT_BOUNDARY = re.compile(r",\s*(?=\{)")
_LEADING_JUNK = re.compile(r"^[\[,\s]+")
_TRAILING_JUNK = re.compile(r"[\],\s]+$")


class DecoderState(str, Enum):
    OPEN = "open"
    DONE = "done"
    ERROR = "error"
    CANCELLED = "cancelled"


class StreamDecoder:
    """Decode streamed fragments into accumulated ``StreamUpdate`` emissions.

    Emissions happen while an internal re-entrant lock is held, so a
    cancellation issued from another thread can never interleave an update
    after the cancelled terminal. ``on_update`` may itself call ``cancel``.
    """

    def __init__(
        self,
        spec: StreamResponseSpec,
        on_update: UpdateCallback,
        *,
        fallback_reasoning_path: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
        ctx: Optional[LogContext] = None,
    ) -> None:
        self._spec = spec
        self._on_update = on_update
        self._reasoning_path = spec.reasoning_path or fallback_reasoning_path
        self._logger = logger or get_logger("omni_adapter.protocol.stream")
        self._ctx = ctx
        self._lock = threading.RLock()
        self._state = DecoderState.OPEN
        self._text = ""
        self._reasoning = ""
        self.metrics = StreamMetrics()

    # State -------------------------------------------------------------------
    @property
    def state(self) -> DecoderState:
        return self._state

    @property
    def text(self) -> str:
        return self._text

    @property
    def reasoning(self) -> str:
        return self._reasoning

    @property
    def closed(self) -> bool:
        return self._state is not DecoderState.OPEN

    # Transport events --------------------------------------------------------
    def feed(self, chunk: str) -> None:
        """Decode one raw fragment and emit any recovered content."""
        with self._lock:
            if self.closed:
                return
            self.metrics.chunks += 1
            for payload in self._payloads(chunk):
                if self.closed:
                    return
                self._apply(payload)

    def finish(self) -> None:
        """Transport end-of-stream: emit the accumulated text as terminal."""
        with self._lock:
            if not self._close(DecoderState.DONE):
                return
            self._emit(StreamUpdate(self._text, done=True, reasoning=self._reasoning or None))
            self._log_terminal("stream.end", emitted=True)

    def fail(self, error_text: str) -> None:
        """Transport error: emit an error terminal, preserving partial text."""
        with self._lock:
            if not self._close(DecoderState.ERROR):
                return
            self._emit(
                StreamUpdate(
                    f"{STREAM_ERROR_PREFIX}{error_text}",
                    done=True,
                    error=True,
                    reasoning=self._reasoning or None,
                    partial=self._text,
                )
            )
            self._log_terminal(
                "stream.error", emitted=bool(self._text), error_code=ErrorCode.TRANSPORT.value, error=error_text
            )

    def cancel(self, reason: Optional[str] = None) -> None:
        """Cancellation: emit the cancelled terminal, preserving partial text."""
        with self._lock:
            if not self._close(DecoderState.CANCELLED):
                return
            self._emit(
                StreamUpdate(
                    CANCELLED_MESSAGE,
                    done=True,
                    error=True,
                    reasoning=self._reasoning or None,
                    partial=self._text,
                )
            )
            self._log_terminal(
                "stream.cancelled", emitted=bool(self._text), error_code=ErrorCode.CANCELLED.value, reason=reason
            )

    # Internals ---------------------------------------------------------------
    def _close(self, state: DecoderState) -> bool:
        if self.closed:
            return False
        self._state = state
        self.metrics.finish()
        return True

    def _is_sse(self, chunk: str) -> bool:
        fmt = self._spec.format
        if fmt is not None:
            return fmt == "sse"
        return "data:" in chunk

    def _payloads(self, chunk: str) -> Iterator[Any]:
        if self._is_sse(chunk):
            yield from self._sse_payloads(chunk)
        else:
            yield from self._array_payloads(chunk)

    def _sse_payloads(self, chunk: str) -> Iterator[Any]:
        prefix = self._spec.data_prefix
        sentinel_line = f"{prefix}{self._spec.finish_sentinel}".strip()
        for line in chunk.split("\n"):
            stripped = line.strip()
            if not stripped or stripped == sentinel_line:
                continue
            if not line.startswith(prefix):
                continue
            payload = self._parse(line[len(prefix):])
            if payload is not None:
                yield payload

    def _array_payloads(self, chunk: str) -> Iterator[Any]:
        for part in _OBJECT_BOUNDARY.split(chunk):
            part = _TRAILING_JUNK.sub("", _LEADING_JUNK.sub("", part.strip()))
            if not (part.startswith("{") and part.endswith("}")):
                continue
            payload = self._parse(part)
            if payload is not None:
                yield payload

    def _parse(self, text: str) -> Any:
        try:
            return json.loads(text)
        except ValueError:
            self.metrics.skipped_fragments += 1
            log_event(
                self._logger,
                "stream.fragment.skip",
                self._ctx,
                level=logging.DEBUG,
                code=ErrorCode.DECODE.value,
                fragment=text[:80],
            )
            return None

    def _apply(self, payload: Any) -> None:
        content = get_path(payload, self._spec.content_path)
        if is_present(content):
            self._text += stringify(content)
            self._emit(StreamUpdate(self._text))
        if not self._reasoning_path or self.closed:
            return
        reasoning = get_path(payload, self._reasoning_path)
        if is_present(reasoning):
            self._reasoning += stringify(reasoning)
            self._emit(StreamUpdate(self._text, reasoning=self._reasoning))

    def _emit(self, update: StreamUpdate) -> None:
        if not update.done:
            self.metrics.record_emission()
        self._on_update(update)

    def _log_terminal(self, event: str, *, emitted: bool, error_code: Optional[str] = None, **fields: Any) -> None:
        normalized_log_event(
            self._logger,
            event,
            self._ctx,
            phase="finalize",
            emitted=emitted,
            error_code=error_code,
            level=logging.WARNING if event == "stream.error" else logging.INFO,
            metrics=self.metrics.to_dict(),
            **fields,
        )


__all__ = ["StreamDecoder", "DecoderState", "CANCELLED_MESSAGE", "STREAM_ERROR_PREFIX"]
