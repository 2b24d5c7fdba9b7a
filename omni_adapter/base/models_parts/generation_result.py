"""
GenerationResult DTO returned by non-streaming adapter calls.

Failures are folded into the result (``error`` set, ``code`` classified) so
callers that prefer values over exceptions never see a raised error.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..errors_parts.error_code import ErrorCode


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a single non-streaming generation.

    Attributes:
        text: Extracted reply text ("" on failure).
        reasoning: Extracted reasoning text when the provider returns one.
        error: Error message when the call failed.
        code: Normalized error classification when the call failed.
    """

    text: str = ""
    reasoning: Optional[str] = None
    error: Optional[str] = None
    code: Optional[ErrorCode] = None

    @property
    def ok(self) -> bool:
        return self.error is None


__all__ = ["GenerationResult"]
