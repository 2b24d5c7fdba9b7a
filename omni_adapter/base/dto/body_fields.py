"""Body field specifications.

Each field targets a dotted ``path`` in the request body and carries a value
kind, expressed as a closed union discriminated on ``kind``:

- ``static``: a literal value.
- ``template``: a template string resolved against the generation variables.
- ``dynamic``: computed from the conversation (``messages``/``contents``
  paths), or the system prompt at path ``system``; ``value`` is the fallback.
- ``visual_structure``: message records generated from a ``JsonNode`` tree.

Fields are written in declared order; a later field writing the same path wins.
"""
from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field

from .config_model import ConfigModel
from .message_specs import MessageStructureSpec, MessageTransformSpec


class StaticField(ConfigModel):
    kind: Literal["static"] = "static"
    path: str
    value: Any = None


class TemplateField(ConfigModel):
    kind: Literal["template"] = "template"
    path: str
    template: str = ""


class DynamicField(ConfigModel):
    kind: Literal["dynamic"] = "dynamic"
    path: str
    transform: Optional[MessageTransformSpec] = None
    value: Any = None


class VisualStructureField(ConfigModel):
    kind: Literal["visual_structure"] = "visual_structure"
    path: str
    structure: Optional[MessageStructureSpec] = None


BodyFieldSpec = Annotated[
    Union[StaticField, TemplateField, DynamicField, VisualStructureField],
    Field(discriminator="kind"),
]

__all__ = [
    "BodyFieldSpec",
    "StaticField",
    "TemplateField",
    "DynamicField",
    "VisualStructureField",
]
