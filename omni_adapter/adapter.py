"""Protocol adapter: the caller-facing entry point.

``ProtocolAdapter`` ties the pure protocol modules to a ``Transport``:

* ``generate`` / ``invoke``: one non-streaming call. ``invoke`` raises
  ``AdapterError`` subclasses; ``generate`` folds every failure into a
  ``GenerationResult``.
* ``generate_stream``: one streaming call reported through ``on_update``
  (zero or more ``done=False`` updates, then exactly one ``done=True``).
* ``cancel``: cancel the in-flight streaming call, if any.
* ``test_connection`` / ``fetch_models`` / ``fetch_balance``: configuration
  helpers.

Single-flight
-------------
Each adapter owns one ``SingleFlight``. Starting a streaming call cancels the
previous one first, so the previous call's cancelled terminal is delivered
before any update of the new call. Independent adapters share nothing.

``generate_stream`` runs the transport on the calling thread. With the
shipped ``HttpxTransport`` it returns once the stream has ended; run it in a
worker thread and call ``cancel`` (or ``StreamHandle.cancel``) from another
to stop early.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import List, Optional, Union

from .adapter_parts.connection_check import (
    PROBE_MESSAGE,
    REASONING_PREVIEW_CHARS,
    REPLY_PREVIEW_CHARS,
    ConnectionCheck,
    preview,
)
from .adapter_parts.stream_handle import StreamHandle
from .base.cancellation import SingleFlight
from .base.dto import ProviderConfig
from .base.errors import AdapterError, ConfigurationError, ErrorCode, TransportError, code_for_status
from .base.http import HttpxTransport
from .base.interfaces import ProviderStore, Transport
from .base.log_support import LogContext
from .base.logging import get_logger, log_event, normalized_log_event
from .base.models import BalanceInfo, GenerationRequest, GenerationResult, HttpRequest, ModelInfo
from .base.streaming import StreamUpdate, UpdateCallback
from .protocol import balance, model_listing
from .protocol.request_builder import build_request
from .protocol.response import error_message, extract_content, extract_reasoning, parse_json
from .protocol.stream_decoder import StreamDecoder

ProviderRef = Union[ProviderConfig, str]
MISSING_TERMINAL_MESSAGE = "stream ended without terminal event"


class ProtocolAdapter:
    """Drive chat generations against any provider described by a ProtocolSpec."""

    def __init__(
        self,
        transport: Optional[Transport] = None,
        *,
        store: Optional[ProviderStore] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.transport: Transport = transport if transport is not None else HttpxTransport()
        self.store = store
        self.logger = logger or get_logger("omni_adapter.adapter")
        self._flight = SingleFlight()

    # Resolution --------------------------------------------------------------
    def resolve_provider(self, provider: ProviderRef) -> ProviderConfig:
        """Return ``provider`` itself or look its id up in the store."""
        if isinstance(provider, ProviderConfig):
            return provider
        found = self.store.get(provider) if self.store is not None else None
        if found is None:
            raise ConfigurationError(message=f"unknown provider '{provider}'", provider=str(provider))
        return found

    @staticmethod
    def resolve_model(provider: ProviderConfig, request: GenerationRequest) -> str:
        """Pick the model: request, then provider default, then first listed."""
        model = request.model or provider.default_model or (provider.models[0] if provider.models else "")
        if not model:
            raise ConfigurationError(message="no model configured", provider=provider.id)
        return model

    def build(self, provider: ProviderRef, request: GenerationRequest) -> HttpRequest:
        """Resolve provider and model, then build the HTTP request (no I/O)."""
        config = self.resolve_provider(provider)
        model = self.resolve_model(config, request)
        return build_request(config.protocol, config, request, model)

    # Non-streaming -----------------------------------------------------------
    def invoke(self, provider: ProviderRef, request: GenerationRequest) -> GenerationResult:
        """Send one non-streaming call and extract the reply.

        Raises:
            ConfigurationError: unknown provider, no protocol or no model.
            TransportError: non-2xx response or network failure.
            AdapterError: (``DECODE``) the body is not JSON.
        """
        config = self.resolve_provider(provider)
        if request.stream:
            request = dataclasses.replace(request, stream=False)
        model = self.resolve_model(config, request)
        http_request = build_request(config.protocol, config, request, model)
        ctx = LogContext(provider=config.id, model=model)
        log_event(self.logger, "chat.start", ctx, url=http_request.url, history=len(request.history))
        response = self.transport.send_request(http_request)
        spec = config.protocol.response
        if not response.success:
            raise TransportError(
                code=code_for_status(response.status) if response.status else ErrorCode.TRANSPORT,
                message=error_message(response, spec),
                provider=config.id,
                model=model,
                status=response.status,
                body=response.body,
            )
        try:
            data = parse_json(response.body)
        except AdapterError as exc:
            exc.provider, exc.model = config.id, model
            raise
        result = GenerationResult(text=extract_content(data, spec), reasoning=extract_reasoning(data, spec))
        normalized_log_event(
            self.logger,
            "chat.end",
            ctx,
            phase="finalize",
            emitted=bool(result.text),
            status=response.status,
            chars=len(result.text),
        )
        return result

    def generate(self, provider: ProviderRef, request: GenerationRequest) -> GenerationResult:
        """Like ``invoke`` but never raises ``AdapterError``; failures are folded in."""
        try:
            return self.invoke(provider, request)
        except AdapterError as exc:
            normalized_log_event(
                self.logger,
                "chat.error",
                LogContext(provider=exc.provider, model=exc.model),
                phase="finalize",
                emitted=False,
                error_code=exc.code.value,
                level=logging.WARNING,
                error=exc.message,
            )
            return GenerationResult(error=exc.message, code=exc.code)

    # Streaming ---------------------------------------------------------------
    def generate_stream(
        self,
        provider: ProviderRef,
        request: GenerationRequest,
        on_update: UpdateCallback,
    ) -> StreamHandle:
        """Start a streaming call, superseding any call still in flight.

        Configuration problems are reported through ``on_update`` as a single
        error terminal, never raised.
        """
        token = self._flight.begin()

        def deliver(update: StreamUpdate) -> None:
            if update.done:
                self._flight.release(token)
            on_update(update)

        try:
            config = self.resolve_provider(provider)
            stream_request = dataclasses.replace(request, stream=True)
            model = self.resolve_model(config, stream_request)
            http_request = build_request(config.protocol, config, stream_request, model)
        except AdapterError as exc:
            normalized_log_event(
                self.logger,
                "stream.error",
                LogContext(provider=exc.provider, model=exc.model),
                phase="start",
                emitted=False,
                error_code=exc.code.value,
                level=logging.WARNING,
                error=exc.message,
            )
            deliver(StreamUpdate(exc.message, done=True, error=True, partial=""))
            return StreamHandle(token)

        ctx = LogContext(provider=config.id, model=model)
        decoder = StreamDecoder(
            config.protocol.stream.response,
            deliver,
            fallback_reasoning_path=config.protocol.response.reasoning_path,
            logger=self.logger,
            ctx=ctx,
        )
        token.on_cancel(decoder.cancel)
        handle = StreamHandle(token, decoder)
        if token.cancelled:
            return handle
        log_event(self.logger, "stream.start", ctx, url=http_request.url, history=len(request.history))
        try:
            self.transport.send_stream_request(
                http_request,
                decoder.feed,
                decoder.finish,
                decoder.fail,
                cancellation_token=token,
            )
        except Exception as exc:  # noqa: BLE001 - transport contract violation surfaces as stream error
            decoder.fail(str(exc))
            return handle
        if not decoder.closed and not token.cancelled:
            decoder.fail(MISSING_TERMINAL_MESSAGE)
        return handle

    def cancel(self, reason: Optional[str] = None) -> bool:
        """Cancel the in-flight streaming call. Returns True when one was running."""
        return self._flight.cancel_current(reason)

    @property
    def busy(self) -> bool:
        return self._flight.current is not None

    # Helpers -----------------------------------------------------------------
    def test_connection(self, provider: ProviderRef) -> ConnectionCheck:
        """Send a short probe and report ``(success, message)``.

        Missing provider, protocol, API key or model fail without any
        network call.
        """
        try:
            config = self.resolve_provider(provider)
        except ConfigurationError:
            return ConnectionCheck(False, "Provider not found")
        if config.protocol is None:
            return ConnectionCheck(False, "Provider has no protocol configuration")
        if not config.api_key:
            return ConnectionCheck(False, "API key is not set")
        probe = GenerationRequest(message=PROBE_MESSAGE)
        try:
            self.resolve_model(config, probe)
        except ConfigurationError:
            return ConnectionCheck(False, "No model configured")

        result = self.generate(config, probe)
        if not result.ok:
            return ConnectionCheck(False, f"Connection failed: {result.error}")
        message = f'Connection OK. Reply: "{preview(result.text, REPLY_PREVIEW_CHARS)}"'
        if result.reasoning:
            message += f'\nReasoning: "{preview(result.reasoning, REASONING_PREVIEW_CHARS)}"'
        return ConnectionCheck(True, message)

    def fetch_models(self, provider: ProviderRef) -> List[ModelInfo]:
        """List the provider's models through its listing endpoint."""
        return model_listing.fetch_models(self.resolve_provider(provider), self.transport, logger=self.logger)

    def fetch_balance(self, provider: ProviderRef) -> BalanceInfo:
        """Read the provider's account balance through its balance endpoint."""
        return balance.fetch_balance(self.resolve_provider(provider), self.transport, logger=self.logger)


__all__ = ["ProtocolAdapter", "StreamHandle", "ConnectionCheck", "ProviderRef"]
