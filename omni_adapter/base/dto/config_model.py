"""Shared pydantic base for declarative protocol configuration.

Provider configurations are authored by hand (JSON/YAML files, settings UIs)
in either snake_case or camelCase. ``ConfigModel`` accepts both spellings by
generating camelCase aliases while still allowing population by field name.
Unknown keys are ignored so configurations written for newer versions still
load.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ConfigModel(BaseModel):
    """Base class for all protocol configuration models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        protected_namespaces=(),
    )


__all__ = ["ConfigModel"]
