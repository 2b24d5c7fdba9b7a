"""
GenerationRequest DTO describing one logical chat call.

Created fresh per call by the caller. ``history`` is used as the entire
conversation when non-empty; ``message`` is only sent as a single user turn
when the history is empty.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .conversation_turn import ConversationTurn


@dataclass(frozen=True)
class GenerationRequest:
    """Provider-agnostic chat request consumed by the request builder.

    Attributes:
        message: Current message text.
        history: Ordered conversation turns (possibly empty).
        model: Target model id. ``None`` defers to the provider default.
        system_prompt: Optional system prompt.
        temperature: Optional sampling temperature; templates fall back to 0.7.
        stream: Whether a streaming response is requested.
    """

    message: str
    history: Sequence[ConversationTurn] = field(default_factory=tuple)
    model: Optional[str] = None
    system_prompt: Optional[str] = None
    temperature: Optional[float] = None
    stream: bool = False


__all__ = ["GenerationRequest"]
