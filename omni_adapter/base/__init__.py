"""
Adapter Base Package

Exports the protocol-agnostic contracts, DTOs, error taxonomy and the shipped
transport used by ``omni_adapter.protocol`` and ``omni_adapter.adapter``:

- Interfaces: ``Transport`` and ``ProviderStore`` boundaries
- DTOs: pydantic configuration models and dataclass request/response objects
- Repositories: in-memory provider store
- Infrastructure: logging, timeouts, cancellation and the httpx transport
"""

from .cancellation import CancellationToken, CancelledError, SingleFlight
from .dto import ProtocolSpec, ProviderConfig
from .errors import AdapterError, ConfigurationError, ErrorCode, TransportError, classify_exception
from .http import HttpxTransport
from .interfaces import ProviderStore, Transport
from .models import (
    BalanceInfo,
    ConversationTurn,
    GenerationRequest,
    GenerationResult,
    HttpRequest,
    HttpResponse,
    ModelInfo,
)
from .repositories import InMemoryProviderStore
from .streaming import StreamMetrics, StreamUpdate
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Models
    "BalanceInfo",
    "ConversationTurn",
    "GenerationRequest",
    "GenerationResult",
    "HttpRequest",
    "HttpResponse",
    "ModelInfo",
    "StreamUpdate",
    "StreamMetrics",
    # Configuration DTOs
    "ProtocolSpec",
    "ProviderConfig",
    # Interfaces
    "Transport",
    "ProviderStore",
    # Errors
    "ErrorCode",
    "AdapterError",
    "ConfigurationError",
    "TransportError",
    "classify_exception",
    # Infrastructure
    "CancellationToken",
    "CancelledError",
    "SingleFlight",
    "HttpxTransport",
    "InMemoryProviderStore",
    "TimeoutConfig",
    "get_timeout_config",
]
