"""Message array transformation for built-in and structured formats."""
from __future__ import annotations

from omni_adapter.base.dto import MessageFormat, MessageStructureSpec, MessageTransformSpec, RoleRemap
from omni_adapter.base.models import ConversationTurn
from omni_adapter.protocol.messages import build_messages, build_structured_messages, select_turns

HISTORY = (ConversationTurn("user", "a"), ConversationTurn("assistant", "b"))


def _fmt(name: str, **remap) -> MessageTransformSpec:
    return MessageTransformSpec(format=MessageFormat(name), remap=RoleRemap(**remap))


def test_gemini_with_system_prompt():
    out = build_messages([], "hi", "sys", _fmt("gemini"))
    assert out == [  # nosec B101
        {"role": "system", "parts": [{"text": "sys"}]},
        {"role": "user", "parts": [{"text": "hi"}]},
    ]


def test_gemini_assistant_is_always_model():
    out = build_messages(HISTORY, "", None, _fmt("gemini", assistant_role="bot"))
    assert [m["role"] for m in out] == ["user", "model"]  # nosec B101


def test_history_takes_precedence_over_current_message():
    out = build_messages(HISTORY, "c", None)
    assert [m["content"] for m in out] == ["a", "b"]  # nosec B101


def test_blank_current_message_without_history_is_dropped():
    assert select_turns([], "   ") == []  # nosec B101
    assert build_messages([], "", "sys") == [{"role": "system", "content": "sys"}]  # nosec B101


def test_claude_never_folds_system_prompt():
    out = build_messages([], "hi", "sys", _fmt("claude"))
    assert out == [{"role": "user", "content": "hi"}]  # nosec B101


def test_custom_remap_and_wrapper_field():
    transform = _fmt(
        "custom",
        role_field="speaker",
        content_field="text",
        user_role="human",
        system_role="instructions",
        wrapper_field="segments",
    )
    out = build_messages([], "hi", "be brief", transform)
    assert out == [  # nosec B101
        {"speaker": "instructions", "text": "be brief"},
        {"speaker": "human", "text": "hi", "segments": [{"text": "hi"}]},
    ]


def test_structured_messages_apply_item_per_message():
    structure = MessageStructureSpec.model_validate(
        {
            "root": {
                "type": "array",
                "item": {
                    "type": "object",
                    "children": [
                        {"key": "author", "node": {"type": "template", "variable": "role"}},
                        {"key": "body", "node": {"type": "template", "variable": "content"}},
                        {"key": "model", "node": {"type": "template", "variable": "model"}},
                    ],
                },
            },
            "roleMapping": {"assistant": "bot"},
        }
    )
    out = build_structured_messages(HISTORY, "ignored", "sys", structure, {"model": "m1"})
    assert out == [  # nosec B101
        {"author": "system", "body": "sys", "model": "m1"},
        {"author": "user", "body": "a", "model": "m1"},
        {"author": "bot", "body": "b", "model": "m1"},
    ]
