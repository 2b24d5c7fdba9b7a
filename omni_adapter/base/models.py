"""
Provider-agnostic domain models (DTOs) public surface.

Re-exports the one-class-per-file implementations under
``omni_adapter.base.models_parts``.
"""

from .models_parts.balance_info import BalanceInfo
from .models_parts.conversation_turn import ConversationTurn, Role
from .models_parts.generation_request import GenerationRequest
from .models_parts.generation_result import GenerationResult
from .models_parts.http_request import HttpRequest
from .models_parts.http_response import HttpResponse
from .models_parts.model_info import ModelInfo

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
