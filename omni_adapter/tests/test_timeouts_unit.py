from __future__ import annotations

from omni_adapter.base.timeouts import TimeoutConfig, get_timeout_config


def test_defaults(clean_env):
    cfg = get_timeout_config()
    assert cfg == TimeoutConfig()  # nosec B101
    timeout = cfg.for_purpose("stream")
    assert timeout.read == cfg.stream_timeout_seconds and timeout.connect == cfg.connect_timeout_seconds  # nosec B101
    assert cfg.for_purpose("chat").read == cfg.http_timeout_seconds  # nosec B101


def test_env_overrides_refresh_cache(clean_env):
    clean_env.setenv("OMNI_ADAPTER_STREAM_TIMEOUT_SECONDS", "5")
    clean_env.setenv("OMNI_ADAPTER_HTTP_TIMEOUT_SECONDS", "-1")
    cfg = get_timeout_config()
    assert cfg.stream_timeout_seconds == 5.0  # nosec B101
    assert cfg.http_timeout_seconds == TimeoutConfig().http_timeout_seconds  # nosec B101
    clean_env.setenv("OMNI_ADAPTER_STREAM_TIMEOUT_SECONDS", "not-a-number")
    assert get_timeout_config().stream_timeout_seconds == TimeoutConfig().stream_timeout_seconds  # nosec B101
