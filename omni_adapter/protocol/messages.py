"""Conversation → provider message array transformation.

Two builders share the same source selection rule: a non-empty history is the
whole conversation (the current message is *not* appended again); only with
an empty history is the current message sent, as a single user turn, and only
when it is not blank.

``build_messages`` renders one of the built-in record shapes:

==========================  ==============================================
format                      record
==========================  ==============================================
gemini                      ``{role: ..., parts: [{text: ...}]}``;
                            assistant is always the literal ``"model"``
openai / claude / custom    ``{role: ..., content: ...}`` plus an optional
                            ``wrapper_field: [{content: ...}]``
==========================  ==============================================

The system prompt is prepended as the first record for every format except
claude, which carries it in a separate top-level body field.

``build_structured_messages`` renders each turn through a ``JsonNode`` tree.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..base.dto import ArrayNode, MessageFormat, MessageStructureSpec, MessageTransformSpec
from ..base.models import ConversationTurn
from .paths import MISSING
from .structure import generate

GEMINI_ASSISTANT_ROLE = "model"


def select_turns(
    history: Sequence[ConversationTurn], current_message: str
) -> List[Tuple[str, str]]:
    """Return the ``(role, text)`` pairs that make up the conversation."""
    if history:
        return [(turn.role, turn.text) for turn in history]
    if current_message and current_message.strip():
        return [("user", current_message)]
    return []


def build_messages(
    history: Sequence[ConversationTurn],
    current_message: str,
    system_prompt: Optional[str],
    transform: Optional[MessageTransformSpec] = None,
) -> List[Dict[str, Any]]:
    """Build the provider-shaped message array for ``transform.format``."""
    transform = transform or MessageTransformSpec()
    fmt = transform.format
    remap = transform.remap
    roles = {"user": remap.user_role, "assistant": remap.assistant_role, "system": remap.system_role}
    messages: List[Dict[str, Any]] = []

    if fmt is MessageFormat.GEMINI:
        if system_prompt:
            messages.append({remap.role_field: remap.system_role, "parts": [{"text": system_prompt}]})
        for role, text in select_turns(history, current_message):
            mapped = GEMINI_ASSISTANT_ROLE if role == "assistant" else roles.get(role, role)
            messages.append({remap.role_field: mapped, "parts": [{"text": text}]})
        return messages

    if system_prompt and fmt is not MessageFormat.CLAUDE:
        messages.append({remap.role_field: remap.system_role, remap.content_field: system_prompt})
    for role, text in select_turns(history, current_message):
        record: Dict[str, Any] = {remap.role_field: roles.get(role, role), remap.content_field: text}
        if remap.wrapper_field:
            record[remap.wrapper_field] = [{remap.content_field: text}]
        messages.append(record)
    return messages


def build_structured_messages(
    history: Sequence[ConversationTurn],
    current_message: str,
    system_prompt: Optional[str],
    structure: MessageStructureSpec,
    template_data: Mapping[str, Any],
) -> List[Any]:
    """Render every message through ``structure.root``.

    When the root is an array node its item node is applied once per message,
    so the result is always one record per message. Each record sees the
    template data plus ``role`` (after ``role_mapping``) and ``content``.
    """
    node = structure.root
    if isinstance(node, ArrayNode) and node.item is not None:
        node = node.item

    turns: List[Tuple[str, str]] = []
    if system_prompt:
        turns.append(("system", system_prompt))
    turns.extend(select_turns(history, current_message))

    records: List[Any] = []
    for role, text in turns:
        data = dict(template_data)
        data["role"] = structure.role_mapping.get(role) or role
        data["content"] = text
        record = generate(node, data)
        records.append(None if record is MISSING else record)
    return records


__all__ = ["build_messages", "build_structured_messages", "select_turns", "GEMINI_ASSISTANT_ROLE"]
