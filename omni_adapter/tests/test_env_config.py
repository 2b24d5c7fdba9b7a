"""Provider configuration loading: files, presets, env overrides, placeholders."""
from __future__ import annotations

import json

import pytest

from omni_adapter.base.dto import QueryParamSignal, UrlReplacementSignal
from omni_adapter.base.errors import ConfigurationError
from omni_adapter.config import (
    apply_env_overrides,
    is_placeholder,
    load_provider_configs,
    parse_provider_entries,
    preset_protocol,
    preset_provider,
)
from omni_adapter.config.defaults import PRESET_NAMES
from omni_adapter.config.env import env_prefix

YAML_DOC = """
providers:
  - id: gemini
    preset: gemini
  - id: my-proxy
    endpoint: https://proxy.test/v1/chat
    apiKey: changeme
    defaultModel: llama-3
    protocol:
      headers:
        - key: Authorization
          valueTemplate: "Bearer {apiKey}"
      bodyFields:
        - {kind: template, path: model, template: "{model}"}
        - {kind: dynamic, path: messages}
      response: {contentPath: "choices[0].message.content"}
      stream:
        enabled: true
        request: {kind: query_param, key: stream}
        response: {contentPath: "choices[0].delta.content"}
"""


def test_load_yaml_file_with_presets_and_camel_case(tmp_path, clean_env):
    path = tmp_path / "providers.yaml"
    path.write_text(YAML_DOC, encoding="utf-8")
    gemini, proxy = load_provider_configs(path)

    assert gemini.default_model == "gemini-1.5-flash"  # nosec B101
    assert gemini.endpoint.endswith(":generateContent")  # nosec B101
    assert isinstance(gemini.protocol.stream.request, UrlReplacementSignal)  # nosec B101

    assert proxy.api_key == ""  # nosec B101 - placeholder blanked
    assert proxy.protocol.headers[0].value_template == "Bearer {apiKey}"  # nosec B101
    assert isinstance(proxy.protocol.stream.request, QueryParamSignal)  # nosec B101
    assert proxy.protocol.stream.request.value == "true"  # nosec B101


def test_load_json_list_and_env_overrides(tmp_path, clean_env):
    path = tmp_path / "providers.json"
    path.write_text(json.dumps([{"id": "openai", "preset": "openai"}]), encoding="utf-8")
    clean_env.setenv("OPENAI_API_KEY", "sk-live")
    clean_env.setenv("OPENAI_MODEL", "example-model")
    (provider,) = load_provider_configs(str(path))
    assert provider.api_key == "sk-live"  # nosec B101
    assert provider.default_model == "gpt-4o-mini"  # nosec B101 - placeholder override ignored


def test_config_file_from_environment(tmp_path, clean_env):
    assert load_provider_configs() == []  # nosec B101
    clean_env.setenv("OMNI_ADAPTER_CONFIG_FILE", str(tmp_path / "absent.json"))
    assert load_provider_configs() == []  # nosec B101
    path = tmp_path / "p.json"
    path.write_text('{"providers": [{"id": "claude", "preset": "claude"}]}', encoding="utf-8")
    clean_env.setenv("OMNI_ADAPTER_CONFIG_FILE", str(path))
    assert [p.id for p in load_provider_configs()] == ["claude"]  # nosec B101


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(ConfigurationError):
        load_provider_configs(tmp_path / "absent.yaml")


def test_invalid_entries_raise_configuration_error(clean_env):
    with pytest.raises(ConfigurationError):
        parse_provider_entries({"providers": [{"endpoint": "no id"}]})
    with pytest.raises(ConfigurationError):
        parse_provider_entries({"providers": ["not a mapping"]})
    with pytest.raises(ConfigurationError):
        parse_provider_entries({"id": "x"})
    with pytest.raises(ConfigurationError):
        parse_provider_entries([{"id": "x", "preset": "unknown"}])


def test_env_prefix_and_apply_overrides(clean_env):
    assert env_prefix("my-proxy.v2") == "MY_PROXY_V2"  # nosec B101
    clean_env.setenv("MY_PROXY_ENDPOINT", "https://override.test")
    provider = preset_provider("openai", provider_id="my-proxy")
    assert apply_env_overrides(provider).endpoint == "https://override.test"  # nosec B101


@pytest.mark.parametrize(
    "value, expected",
    [("PLACEHOLDER", True), ("changeme", True), ("test_key", True), ("sk-real", False), (None, False)],
)
def test_is_placeholder(value, expected):
    assert is_placeholder(value) is expected  # nosec B101


def test_every_preset_validates():
    for name in PRESET_NAMES:
        protocol = preset_protocol(name)
        assert protocol.stream is not None and protocol.stream.enabled  # nosec B101
    with pytest.raises(ConfigurationError):
        preset_protocol("nope")
