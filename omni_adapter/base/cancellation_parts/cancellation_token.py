"""Cooperative cancellation token implementation.

Exposes the ``CancellationToken`` class used to end streaming generations
early. Cancellation is observed two ways: by polling (``cancelled`` /
``raise_if_cancelled``), which is what transports do between fragments, and
by callbacks registered with ``on_cancel``, which is how the stream decoder
learns it must emit its cancelled terminal. Callbacks fire exactly once,
synchronously, from the thread that calls ``cancel``.
"""

from __future__ import annotations

from threading import Lock
from typing import Callable, List, Optional

from .state import State
from .cancelled_error import CancelledError


CancelCallback = Callable[[Optional[str]], None]


class CancellationToken:
    """A one-shot, thread-safe cancellation flag with callbacks."""

    def __init__(self) -> None:
        self._state = State()
        self._lock = Lock()
        self._callbacks: List[CancelCallback] = []

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._state.cancelled

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._state.reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation and run registered callbacks (first call only)."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            callbacks = list(self._callbacks)
            self._callbacks.clear()
        for callback in callbacks:
            callback(reason)

    def on_cancel(self, callback: CancelCallback) -> None:
        """Register ``callback(reason)`` to run when the token is cancelled.

        If the token is already cancelled the callback runs immediately.
        """
        with self._lock:
            if not self._state.cancelled:
                self._callbacks.append(callback)
                return
            reason = self._state.reason
        callback(reason)

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if token is cancelled."""
        if self._state.cancelled:
            raise CancelledError(self._state.reason or "generation cancelled")

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"CancellationToken(cancelled={self._state.cancelled}, "
            f"reason={self._state.reason!r}, callbacks={len(self._callbacks)})"
        )


__all__ = ["CancellationToken", "CancelCallback"]
