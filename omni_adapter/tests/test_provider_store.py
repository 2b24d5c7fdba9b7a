from __future__ import annotations

from omni_adapter.base.interfaces import ProviderStore
from omni_adapter.base.repositories import InMemoryProviderStore
from omni_adapter.config import preset_provider


def test_store_crud_and_protocol_conformance():
    store = InMemoryProviderStore([preset_provider("openai")])
    assert isinstance(store, ProviderStore)  # nosec B101
    assert "openai" in store and len(store) == 1  # nosec B101
    store.save(preset_provider("claude"))
    assert sorted(p.id for p in store.list()) == ["claude", "openai"]  # nosec B101
    assert store.delete("openai") is True and store.delete("openai") is False  # nosec B101
    assert store.get("openai") is None  # nosec B101


def test_store_from_file(tmp_path, clean_env):
    path = tmp_path / "providers.yaml"
    path.write_text("- {id: deepseek, preset: deepseek, apiKey: ds-key}\n", encoding="utf-8")
    store = InMemoryProviderStore.from_file(path)
    provider = store.get("deepseek")
    assert provider is not None and provider.api_key == "ds-key"  # nosec B101
    assert provider.endpoint == "https://api.deepseek.com/chat/completions"  # nosec B101
