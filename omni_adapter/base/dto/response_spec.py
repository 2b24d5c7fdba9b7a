"""Non-streaming response extraction rules."""
from __future__ import annotations

from typing import Optional

from .config_model import ConfigModel


class ResponseSpec(ConfigModel):
    """Paths into the parsed response body.

    ``reasoning_path`` is also the fallback reasoning path for streams whose
    ``StreamResponseSpec`` does not set one. ``error_message_path`` is read
    from the parsed body of failed calls.
    """

    content_path: str
    reasoning_path: Optional[str] = None
    error_message_path: Optional[str] = None


__all__ = ["ResponseSpec"]
