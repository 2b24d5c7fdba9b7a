"""Streaming metrics collected per call by the stream decoder."""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
import time
from typing import Any, Dict, Optional


@dataclass
class StreamMetrics:
    """Counters and timings for a single streaming call.

    ``time_to_first_token_ms`` is measured from construction to the first
    content or reasoning emission; ``total_duration_ms`` to the terminal.
    """

    emitted: int = 0
    chunks: int = 0
    skipped_fragments: int = 0
    time_to_first_token_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None
    _started: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        self._started = time.perf_counter()

    def _elapsed_ms(self) -> float:
        return round((time.perf_counter() - self._started) * 1000.0, 3)

    def record_emission(self) -> None:
        self.emitted += 1
        if self.time_to_first_token_ms is None:
            self.time_to_first_token_ms = self._elapsed_ms()

    def finish(self) -> None:
        if self.total_duration_ms is None:
            self.total_duration_ms = self._elapsed_ms()

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data.pop("_started", None)
        return data


__all__ = ["StreamMetrics"]
