"""Unit tests for cooperative cancellation primitives.

Covers idempotent cancel, cancel callbacks, raise_if_cancelled and the
single-flight coordinator used by the adapter.
"""
from __future__ import annotations

import pytest

from omni_adapter.base.cancellation import (
    SUPERSEDED_REASON,
    CancellationToken,
    CancelledError,
    SingleFlight,
)


def test_cancel_is_idempotent_and_keeps_first_reason():
    token = CancellationToken()

    token.cancel(reason="stop")
    token.cancel(reason="ignored")

    assert token.cancelled is True and token.reason == "stop"  # nosec B101 - pytest assert in tests


def test_raise_if_cancelled_raises_custom_error():
    token = CancellationToken()
    token.raise_if_cancelled()
    token.cancel("terminate")
    with pytest.raises(CancelledError):
        token.raise_if_cancelled()


def test_on_cancel_runs_once_and_late_registration_runs_immediately():
    token = CancellationToken()
    seen = []
    token.on_cancel(seen.append)
    token.cancel("a")
    token.cancel("b")
    token.on_cancel(lambda reason: seen.append(f"late:{reason}"))
    assert seen == ["a", "late:a"]  # nosec B101 - pytest assert in tests


def test_single_flight_begin_cancels_previous():
    flight = SingleFlight()
    first = flight.begin()
    second = flight.begin()
    assert first.cancelled and first.reason == SUPERSEDED_REASON  # nosec B101 - pytest assert in tests
    assert not second.cancelled and flight.current is second  # nosec B101 - pytest assert in tests


def test_single_flight_release_only_clears_matching_token():
    flight = SingleFlight()
    first = flight.begin()
    second = flight.begin()
    flight.release(first)
    assert flight.current is second  # nosec B101 - pytest assert in tests
    flight.release(second)
    assert flight.current is None  # nosec B101 - pytest assert in tests


def test_single_flight_cancel_current():
    flight = SingleFlight()
    assert flight.cancel_current() is False  # nosec B101 - pytest assert in tests
    token = flight.begin()
    assert flight.cancel_current("user") is True  # nosec B101 - pytest assert in tests
    assert token.cancelled and token.reason == "user" and flight.current is None  # nosec B101 - pytest assert in tests
