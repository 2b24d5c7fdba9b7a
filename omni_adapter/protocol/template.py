"""Template engine for ``{name}`` placeholders.

``resolve`` has two modes:

* A template with surrounding text (``"Bearer {apiKey}"``) always yields
  text; every known placeholder is replaced by the string form of its value
  (``None`` → ""). Placeholders naming unknown variables are left untouched.
* A template that is exactly one placeholder (``"{temperature}"``) yields a
  typed value, decided by the variable name and the value's shape:

  - ``model`` is always text.
  - ``stream`` is always a boolean.
  - booleans pass through; numbers pass through unless they are at least
    ``ID_THRESHOLD`` (ids and timestamps), which become text; the strings
    "true"/"false" become booleans; numeric strings below the threshold
    become numbers; anything else is returned as substituted text.
"""
from __future__ import annotations

import json
import math
import re
from typing import Any, Mapping

ID_THRESHOLD = 1_000_000_000

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")
_WHOLE_PLACEHOLDER = re.compile(r"^\{([^{}]+)\}$")
_NUMERIC = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_INTEGRAL = re.compile(r"^[+-]?\d+$")


def stringify(value: Any) -> str:
    """Return the text form used for substitution and content extraction."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


def substitute(template: str, variables: Mapping[str, Any]) -> str:
    """Replace every ``{key}`` naming a known variable; always returns text."""

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in variables:
            return match.group(0)
        return stringify(variables[key])

    return _PLACEHOLDER.sub(_replace, template)


def _parse_number(text: str) -> int | float | None:
    stripped = text.strip()
    if not _NUMERIC.match(stripped):
        return None
    if _INTEGRAL.match(stripped):
        return int(stripped)
    number = float(stripped)
    return number if math.isfinite(number) else None


def _coerce_stream(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value == "true":
        return True
    if value == "false":
        return False
    return bool(value)


def resolve(template: str, variables: Mapping[str, Any]) -> Any:
    """Resolve ``template`` against ``variables`` (see module docstring)."""
    match = _WHOLE_PLACEHOLDER.match(template)
    if match is None:
        return substitute(template, variables)

    name = match.group(1)
    value = variables.get(name)
    if name == "model":
        return stringify(value)
    if name == "stream":
        return _coerce_stream(value)
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return stringify(value) if value >= ID_THRESHOLD else value
    if value == "true":
        return True
    if value == "false":
        return False
    if isinstance(value, str):
        number = _parse_number(value)
        if number is not None and number < ID_THRESHOLD:
            return number
    return substitute(template, variables)


__all__ = ["resolve", "substitute", "stringify", "ID_THRESHOLD"]
