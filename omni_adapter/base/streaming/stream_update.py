"""Streaming update delivered to the caller's ``on_update`` callback.

Updates carry the *whole* text accumulated so far, never a delta. Every call
produces zero or more ``done=False`` updates followed by exactly one
``done=True`` update (success, error or cancellation).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True)
class StreamUpdate:
    """One emission of a streaming call.

    Fields:
      text: accumulated reply text; on error/cancel terminals, the error text
      done: True on the terminal update
      error: True when the terminal update reports an error or cancellation
      reasoning: accumulated reasoning text, when any was decoded
      partial: text accumulated before an error/cancel terminal
    """

    text: str
    done: bool = False
    error: bool = False
    reasoning: Optional[str] = None
    partial: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.done


UpdateCallback = Callable[[StreamUpdate], None]

__all__ = ["StreamUpdate", "UpdateCallback"]
