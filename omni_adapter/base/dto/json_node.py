"""Declarative JSON structure nodes used by the visual-structure message mode.

A ``JsonNode`` is a closed, discriminated union on ``type``:

- ``template``: emit the named template variable verbatim.
- ``literal``: emit a fixed string, number or boolean.
- ``array``: emit a one-element list built from ``item``.
- ``object``: emit a mapping built from ordered ``children``.

Trees are finite and acyclic by construction since they are parsed from data.
"""
from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field

from .config_model import ConfigModel


class TemplateNode(ConfigModel):
    type: Literal["template"] = "template"
    variable: str


class LiteralNode(ConfigModel):
    type: Literal["literal"] = "literal"
    value: Union[bool, int, float, str]


class ArrayNode(ConfigModel):
    """Array node. ``item`` is the template for each element (``None`` → ``[]``)."""

    type: Literal["array"] = "array"
    item: Optional["JsonNode"] = None


class ObjectMember(ConfigModel):
    key: str
    node: "JsonNode"


class ObjectNode(ConfigModel):
    type: Literal["object"] = "object"
    children: List[ObjectMember] = Field(default_factory=list)


JsonNode = Annotated[
    Union[TemplateNode, LiteralNode, ArrayNode, ObjectNode],
    Field(discriminator="type"),
]

ArrayNode.model_rebuild()
ObjectMember.model_rebuild()
ObjectNode.model_rebuild()

__all__ = [
    "JsonNode",
    "TemplateNode",
    "LiteralNode",
    "ArrayNode",
    "ObjectMember",
    "ObjectNode",
]
