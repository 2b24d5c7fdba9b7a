"""StreamHandle: the caller's grip on one streaming generation."""
from __future__ import annotations

from typing import Optional

from ..base.cancellation import CancellationToken
from ..protocol.stream_decoder import DecoderState, StreamDecoder


class StreamHandle:
    """Returned by ``ProtocolAdapter.generate_stream``.

    ``cancel`` is safe to call at any time, repeatedly, and after completion.
    When the call failed before reaching the transport (configuration
    errors) there is no decoder and the handle reports ``DecoderState.ERROR``.
    """

    def __init__(self, token: CancellationToken, decoder: Optional[StreamDecoder] = None) -> None:
        self._token = token
        self._decoder = decoder

    def cancel(self, reason: Optional[str] = None) -> None:
        self._token.cancel(reason)

    @property
    def token(self) -> CancellationToken:
        return self._token

    @property
    def state(self) -> DecoderState:
        return self._decoder.state if self._decoder is not None else DecoderState.ERROR

    @property
    def done(self) -> bool:
        return self.state is not DecoderState.OPEN

    @property
    def text(self) -> str:
        return self._decoder.text if self._decoder is not None else ""

    @property
    def reasoning(self) -> str:
        return self._decoder.reasoning if self._decoder is not None else ""

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"StreamHandle(state={self.state.value}, chars={len(self.text)})"


__all__ = ["StreamHandle"]
