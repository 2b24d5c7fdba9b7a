"""Message encoding specifications for the ``messages``/``contents`` body field.

``MessageTransformSpec`` selects one of the built-in record shapes (openai,
gemini, claude, custom) with an optional remapping of field names and role
literals. ``MessageStructureSpec`` instead describes each record with a
``JsonNode`` tree (the "visual structure" mode).
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import Field

from .config_model import ConfigModel
from .json_node import JsonNode


class MessageFormat(str, Enum):
    """Built-in message record shapes."""

    OPENAI = "openai"
    GEMINI = "gemini"
    CLAUDE = "claude"
    CUSTOM = "custom"


class RoleRemap(ConfigModel):
    """Field-name and role-literal remapping for message records.

    ``wrapper_field``, when set, additionally carries the content as
    ``[{<content_field>: text}]`` under that key (non-gemini formats only).
    """

    role_field: str = "role"
    content_field: str = "content"
    system_role: str = "system"
    user_role: str = "user"
    assistant_role: str = "assistant"
    wrapper_field: Optional[str] = None


class MessageTransformSpec(ConfigModel):
    format: MessageFormat = MessageFormat.OPENAI
    remap: RoleRemap = Field(default_factory=RoleRemap)


def _default_role_mapping() -> Dict[str, str]:
    return {"user": "user", "assistant": "assistant", "system": "system"}


class MessageStructureSpec(ConfigModel):
    """Per-message JSON structure plus role literal mapping.

    When ``root`` is an array node, its item node is used as the per-message
    template; otherwise ``root`` itself is. Unmapped roles pass through as-is.
    """

    enabled: bool = True
    root: JsonNode
    role_mapping: Dict[str, str] = Field(default_factory=_default_role_mapping)


__all__ = ["MessageFormat", "RoleRemap", "MessageTransformSpec", "MessageStructureSpec"]
