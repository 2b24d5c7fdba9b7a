"""JSON structure generator for the visual-structure message mode.

``generate`` materializes a ``JsonNode`` tree against a template-data bag.
Template nodes copy the named value verbatim (no coercion). A template
variable that is absent from the bag yields ``MISSING``; object members
holding ``MISSING`` are omitted and array items holding it become ``None``,
matching how a JSON encoder treats undefined values.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping

from ..base.dto import ArrayNode, JsonNode, LiteralNode, ObjectNode, TemplateNode
from .paths import MISSING


def generate(node: JsonNode, data: Mapping[str, Any]) -> Any:
    """Recursively build the value described by ``node``."""
    if isinstance(node, TemplateNode):
        return data.get(node.variable, MISSING)
    if isinstance(node, LiteralNode):
        return node.value
    if isinstance(node, ArrayNode):
        if node.item is None:
            return []
        item = generate(node.item, data)
        return [None if item is MISSING else item]
    if isinstance(node, ObjectNode):
        result: Dict[str, Any] = {}
        for member in node.children:
            value = generate(member.node, data)
            if value is not MISSING:
                result[member.key] = value
        return result
    raise TypeError(f"unsupported JSON node: {type(node).__name__}")


__all__ = ["generate"]
