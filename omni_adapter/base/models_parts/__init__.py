"""Models parts package public surface.

Re-exports the one-class-per-file DTOs; ``omni_adapter.base.models`` remains
the primary import path.
"""

from .balance_info import BalanceInfo
from .conversation_turn import ConversationTurn, Role
from .generation_request import GenerationRequest
from .generation_result import GenerationResult
from .http_request import HttpRequest
from .http_response import HttpResponse
from .model_info import ModelInfo

__all__ = [
    "BalanceInfo",
    "ConversationTurn",
    "Role",
    "GenerationRequest",
    "GenerationResult",
    "HttpRequest",
    "HttpResponse",
    "ModelInfo",
]
