"""Unit tests for the ``{name}`` template engine.

Covers typed resolution of whole-placeholder templates, text substitution
inside surrounding text, and the id/timestamp threshold.
"""
from __future__ import annotations

import pytest

from omni_adapter.protocol.template import ID_THRESHOLD, resolve, stringify, substitute


def test_model_is_always_text():
    assert resolve("{model}", {"model": "gpt-4"}) == "gpt-4"  # nosec B101
    assert resolve("{model}", {"model": 4}) == "4"  # nosec B101


@pytest.mark.parametrize(
    "raw, expected",
    [("false", False), ("true", True), (False, False), (1, True), (None, False)],
)
def test_stream_is_always_boolean(raw, expected):
    assert resolve("{stream}", {"stream": raw}) is expected  # nosec B101


def test_numbers_below_threshold_pass_through():
    assert resolve("{temperature}", {"temperature": 7}) == 7  # nosec B101
    assert resolve("{temperature}", {"temperature": 0.2}) == 0.2  # nosec B101


def test_numbers_at_or_above_threshold_become_text():
    assert resolve("{temperature}", {"temperature": 1700000000}) == "1700000000"  # nosec B101
    assert resolve("{id}", {"id": ID_THRESHOLD}) == str(ID_THRESHOLD)  # nosec B101


def test_numeric_strings_are_parsed():
    value = resolve("{max_tokens}", {"max_tokens": "1024"})
    assert value == 1024 and isinstance(value, int)  # nosec B101
    assert resolve("{temperature}", {"temperature": "0.5"}) == 0.5  # nosec B101
    assert resolve("{scale}", {"scale": "1e3"}) == 1000.0  # nosec B101
    # Large numeric strings stay text
    assert resolve("{id}", {"id": "9999999999"}) == "9999999999"  # nosec B101


def test_boolean_strings_and_plain_text():
    assert resolve("{flag}", {"flag": "true"}) is True  # nosec B101
    assert resolve("{flag}", {"flag": "false"}) is False  # nosec B101
    assert resolve("{name}", {"name": "abc"}) == "abc"  # nosec B101
    assert resolve("{name}", {"name": "nan"}) == "nan"  # nosec B101


def test_surrounding_text_always_substitutes():
    assert resolve("Bearer {apiKey}", {"apiKey": "abc"}) == "Bearer abc"  # nosec B101
    assert resolve("{a}-{b}", {"a": 1, "b": True}) == "1-true"  # nosec B101


def test_unknown_placeholders_are_left_untouched():
    assert substitute("x={missing}", {}) == "x={missing}"  # nosec B101
    assert resolve("{missing}", {}) == "{missing}"  # nosec B101


def test_stringify_forms():
    assert stringify(None) == ""  # nosec B101
    assert stringify(False) == "false"  # nosec B101
    assert stringify(2.0) == "2"  # nosec B101
    assert stringify(2.5) == "2.5"  # nosec B101
    assert stringify({"a": [1, 2]}) == '{"a":[1,2]}'  # nosec B101
