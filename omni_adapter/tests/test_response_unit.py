from __future__ import annotations

import pytest

from omni_adapter.base.dto import ResponseSpec
from omni_adapter.base.errors import AdapterError, ErrorCode
from omni_adapter.base.models import HttpResponse
from omni_adapter.protocol.response import (
    error_message,
    extract_content,
    extract_reasoning,
    is_present,
    parse_json,
)
from omni_adapter.protocol.paths import MISSING

SPEC = ResponseSpec(
    content_path="choices[0].message.content",
    reasoning_path="choices[0].message.reasoning_content",
    error_message_path="error.message",
)


def test_extract_content_and_reasoning():
    data = {"choices": [{"message": {"content": "hi", "reasoning_content": "because"}}]}
    assert extract_content(data, SPEC) == "hi"  # nosec B101
    assert extract_reasoning(data, SPEC) == "because"  # nosec B101


def test_absent_content_is_empty_and_absent_reasoning_is_none():
    data = {"choices": [{"message": {"content": None}}]}
    assert extract_content(data, SPEC) == ""  # nosec B101
    assert extract_reasoning(data, SPEC) is None  # nosec B101
    assert extract_reasoning(data, ResponseSpec(content_path="x")) is None  # nosec B101


def test_non_text_content_is_stringified():
    assert extract_content({"v": 3}, ResponseSpec(content_path="v")) == "3"  # nosec B101


def test_is_present():
    assert not is_present(MISSING)  # nosec B101
    assert not is_present(None)  # nosec B101
    assert not is_present("")  # nosec B101
    assert is_present(0) and is_present(False)  # nosec B101


def test_parse_json_failure_is_decode_error():
    with pytest.raises(AdapterError) as info:
        parse_json("not json")
    assert info.value.code is ErrorCode.DECODE  # nosec B101


def test_error_message_prefers_provider_message():
    response = HttpResponse(status=401, body='{"error":{"message":"bad key"}}', success=False)
    assert error_message(response, SPEC) == "API error: bad key"  # nosec B101


def test_error_message_falls_back_to_status_and_body():
    response = HttpResponse(status=502, body="<html>gateway</html>", success=False)
    assert error_message(response, SPEC) == "API error: 502 - <html>gateway</html>"  # nosec B101
    response = HttpResponse(status=0, success=False, error_text="connection refused")
    assert error_message(response, None) == "API error: 0 - connection refused"  # nosec B101
