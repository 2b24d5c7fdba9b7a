"""
ConversationTurn DTO: one role-tagged message of a caller-owned history.

Histories are passed as ordered sequences of turns. The adapter reads them but
never mutates or retains them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Role = Literal["user", "assistant"]


@dataclass(frozen=True)
class ConversationTurn:
    """A single turn in a conversation history.

    Attributes:
        role: ``"user"`` or ``"assistant"``.
        text: Message text of the turn.
    """

    role: Role
    text: str


__all__ = ["ConversationTurn", "Role"]
