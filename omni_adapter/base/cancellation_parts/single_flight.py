"""Single-flight coordinator for streaming generations.

An adapter instance owns exactly one ``SingleFlight``. Beginning a new
generation cancels whichever token is current and installs a fresh one, so at
most one generation is ever live per adapter. The slot is cleared when the
owning call finishes, but only if it still refers to that call's token.
"""

from __future__ import annotations

from threading import Lock
from typing import Optional

from .cancellation_token import CancellationToken

SUPERSEDED_REASON = "superseded by a newer generation"


class SingleFlight:
    """Holds the "current" cancellation token for one adapter instance."""

    def __init__(self) -> None:
        self._current: Optional[CancellationToken] = None
        self._lock = Lock()

    @property
    def current(self) -> Optional[CancellationToken]:
        return self._current

    def begin(self) -> CancellationToken:
        """Cancel any in-flight token, then install and return a fresh one."""
        token = CancellationToken()
        with self._lock:
            previous = self._current
            self._current = token
        if previous is not None:
            previous.cancel(SUPERSEDED_REASON)
        return token

    def release(self, token: CancellationToken) -> None:
        """Clear the slot if it still references ``token``."""
        with self._lock:
            if self._current is token:
                self._current = None

    def cancel_current(self, reason: str | None = None) -> bool:
        """Cancel the current token, if any. Returns True when one was cancelled."""
        with self._lock:
            token = self._current
            self._current = None
        if token is None:
            return False
        token.cancel(reason)
        return True


__all__ = ["SingleFlight", "SUPERSEDED_REASON"]
