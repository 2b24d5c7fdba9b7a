"""Pytest configuration for the adapter test suite.

Provides a recording ``FakeTransport`` (no network), preset-based sample
providers and an isolated environment for configuration tests.
"""

from __future__ import annotations

import os
from typing import Iterator

import pytest

from omni_adapter.config import preset_provider
from omni_adapter.tests.utils import FakeTransport, UpdateRecorder


@pytest.fixture()
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def recorder() -> UpdateRecorder:
    return UpdateRecorder()


@pytest.fixture()
def openai_provider():
    return preset_provider("openai", api_key="sk-test", model="gpt-4o-mini")


@pytest.fixture()
def gemini_provider():
    return preset_provider("gemini", api_key="g-key", model="gemini-1.5-flash")


@pytest.fixture()
def claude_provider():
    return preset_provider("claude", api_key="c-key", model="claude-3-5-sonnet-latest")


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Remove adapter-related environment variables for the duration of a test."""

    for key in list(os.environ):
        if key.startswith("OMNI_ADAPTER_") or key.endswith(("_API_KEY", "_MODEL", "_ENDPOINT")):
            monkeypatch.delenv(key, raising=False)
    yield monkeypatch
