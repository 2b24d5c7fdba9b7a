from __future__ import annotations

import types

import httpx

from omni_adapter.base.errors import (
    AdapterError,
    ConfigurationError,
    ErrorCode,
    TransportError,
    classify_exception,
    code_for_status,
)


def test_classify_adapter_error_passthrough():
    e = AdapterError(code=ErrorCode.AUTH, message="nope", provider="x")
    assert classify_exception(e) is ErrorCode.AUTH  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(ConfigurationError()) is ErrorCode.CONFIGURATION  # nosec B101


def test_classify_http_status_mapping():
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorCode.NOT_FOUND  # nosec B101 - assert is appropriate in unit tests
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=503))
    assert classify_exception(e2) is ErrorCode.UNAVAILABLE  # nosec B101 - assert is appropriate in unit tests


def test_classify_httpx_failures():
    request = httpx.Request("GET", "https://x.test")
    assert classify_exception(httpx.ReadTimeout("t", request=request)) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ConnectError("c", request=request)) is ErrorCode.TRANSPORT  # nosec B101


def test_classify_heuristics():
    assert classify_exception(Exception("rate limit exceeded")) is ErrorCode.RATE_LIMIT  # nosec B101
    assert classify_exception(Exception("timed out waiting")) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(Exception("random")) is ErrorCode.UNKNOWN  # nosec B101


def test_code_for_status():
    assert code_for_status(429) is ErrorCode.RATE_LIMIT  # nosec B101
    assert code_for_status(599) is ErrorCode.SERVER_ERROR  # nosec B101
    assert code_for_status(418) is ErrorCode.TRANSPORT  # nosec B101


def test_transport_error_defaults():
    err = TransportError(status=500, body="x")
    assert err.code is ErrorCode.TRANSPORT and err.status == 500  # nosec B101
