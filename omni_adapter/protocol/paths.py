"""Nested path accessor for trees of mappings and lists.

``get_path`` understands dotted segments with an optional trailing ``[i]``
index (``choices[0].delta.content``) and returns ``MISSING`` instead of
raising when any step does not resolve. ``set_path`` understands dotted
segments only; index syntax is written as a literal key.
"""
from __future__ import annotations

import re
from typing import Any, MutableMapping

_INDEXED_SEGMENT = re.compile(r"^(.*?)\[(\d+)\]$")


class _Missing:
    """Sentinel type for "no value at this path"."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def get_path(root: Any, path: str) -> Any:
    """Return the value at ``path`` inside ``root`` or ``MISSING``.

    An empty path returns ``root`` itself. A segment of the form ``[i]``
    (empty name) indexes the current node.
    """
    if not path:
        return root
    node = root
    for segment in path.split("."):
        match = _INDEXED_SEGMENT.match(segment)
        name, index = (match.group(1), int(match.group(2))) if match else (segment, None)
        if name:
            if not isinstance(node, dict) or name not in node:
                return MISSING
            node = node[name]
        if index is not None:
            if not isinstance(node, list) or index >= len(node):
                return MISSING
            node = node[index]
    return node


def set_path(root: MutableMapping[str, Any], path: str, value: Any) -> None:
    """Assign ``value`` at dotted ``path``, creating intermediate mappings.

    An intermediate segment that holds a non-mapping value is replaced by a
    fresh mapping. The leaf is always overwritten.
    """
    keys = path.split(".")
    node = root
    for key in keys[:-1]:
        child = node.get(key)
        if not isinstance(child, dict):
            child = {}
            node[key] = child
        node = child
    node[keys[-1]] = value


__all__ = ["MISSING", "get_path", "set_path"]
