"""Account balance lookup through the adapter's transport."""
from __future__ import annotations

import pytest

from omni_adapter import ProtocolAdapter
from omni_adapter.base.dto import BalanceSpec
from omni_adapter.base.errors import AdapterError, ConfigurationError, ErrorCode, TransportError
from omni_adapter.config import preset_provider
from omni_adapter.protocol.balance import parse_balance

_DEEPSEEK_BODY = {
    "is_available": True,
    "balance_infos": [{"currency": "CNY", "total_balance": "110.00", "granted_balance": "10.00"}],
}


@pytest.fixture()
def deepseek_provider():
    return preset_provider("deepseek", api_key="ds-key")


def test_deepseek_preset_reads_fixed_paths(fake_transport, deepseek_provider):
    fake_transport.reply(_DEEPSEEK_BODY)
    info = ProtocolAdapter(fake_transport).fetch_balance(deepseek_provider)

    assert (info.balance, info.currency, info.is_available) == ("110.00", "CNY", True)  # nosec B101
    assert info.raw == _DEEPSEEK_BODY and info.provider == "deepseek"  # nosec B101
    request = fake_transport.requests[0]
    assert request.url == "https://api.deepseek.com/user/balance"  # nosec B101
    assert request.method == "GET" and request.headers["Authorization"] == "Bearer ds-key"  # nosec B101


def test_response_fields_replace_fixed_paths(deepseek_provider):
    spec = BalanceSpec.model_validate(
        {
            "endpoint": "https://llm.test/balance?key={apiKey}",
            "responsePath": "balance_infos[0]",
            "responseFields": [
                {"fieldPath": "balance_infos[0].total_balance", "displayName": "Balance"},
                {"fieldPath": "missing.value"},
                {"fieldPath": ""},
            ],
            "balancePath": "balance_infos[0].granted_balance",
        }
    )
    info = parse_balance(deepseek_provider, spec, _DEEPSEEK_BODY)

    assert info.raw == _DEEPSEEK_BODY["balance_infos"][0]  # nosec B101
    assert info.fields == {"balance_infos[0].total_balance": "110.00", "missing.value": None}  # nosec B101
    assert info.get("balance_infos[0].total_balance") == "110.00"  # nosec B101
    assert info.balance is None  # nosec B101


def test_endpoint_template_and_unresolved_raw(fake_transport, deepseek_provider):
    balance = {"endpoint": "https://llm.test/balance?key={apiKey}", "responsePath": "nope"}
    protocol = deepseek_provider.protocol.model_copy(update={"balance": BalanceSpec.model_validate(balance)})
    provider = deepseek_provider.model_copy(update={"protocol": protocol})
    fake_transport.reply({"total": 3})

    info = ProtocolAdapter(fake_transport).fetch_balance(provider)

    assert fake_transport.requests[0].url == "https://llm.test/balance?key=ds-key"  # nosec B101
    assert info.raw is None and info.balance is None and info.fields == {}  # nosec B101


def test_balance_errors(fake_transport, deepseek_provider, openai_provider):
    adapter = ProtocolAdapter(fake_transport)
    with pytest.raises(ConfigurationError):
        adapter.fetch_balance(openai_provider)

    fake_transport.reply("<html>oops</html>")
    with pytest.raises(AdapterError) as info:
        adapter.fetch_balance(deepseek_provider)
    assert info.value.code is ErrorCode.DECODE  # nosec B101

    fake_transport.responses.clear()
    fake_transport.reply("rate limited", status=429)
    with pytest.raises(TransportError) as info:
        adapter.fetch_balance(deepseek_provider)
    assert info.value.code is ErrorCode.RATE_LIMIT and info.value.status == 429  # nosec B101
