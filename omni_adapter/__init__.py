"""omni_adapter package

Configurable protocol adapter for chat-completion style AI APIs.

Purpose:
    Talk to any provider whose request and response shapes can be described
    declaratively. A ``ProtocolSpec`` says where the model, messages and
    parameters go in the request and where the reply (and reasoning) text is
    found in the response, for both non-streaming and streaming calls.

Public API (re-exported):
    - Version: ``__version__``
    - Adapter: :class:`ProtocolAdapter`, :class:`StreamHandle`
    - Requests/results: :class:`GenerationRequest`, :class:`ConversationTurn`,
      :class:`GenerationResult`, :class:`StreamUpdate`
    - Configuration: :class:`ProviderConfig`, :class:`ProtocolSpec`,
      :func:`load_provider_configs`, :func:`preset_provider`
    - Exceptions: :class:`AdapterError`, :class:`ConfigurationError`,
      :class:`TransportError`, :class:`ErrorCode`

Example:
    adapter = ProtocolAdapter()
    provider = preset_provider("openai", api_key="sk-...")
    result = adapter.generate(provider, GenerationRequest(message="Hello"))
"""

from .adapter import ConnectionCheck, ProtocolAdapter, StreamHandle
from .base.dto import ProtocolSpec, ProviderConfig
from .base.errors import AdapterError, ConfigurationError, ErrorCode, TransportError
from .base.models import ConversationTurn, GenerationRequest, GenerationResult, ModelInfo, BalanceInfo
from .base.repositories import InMemoryProviderStore
from .base.streaming import StreamUpdate
from .config import load_provider_configs, preset_protocol, preset_provider

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Adapter
    "ProtocolAdapter",
    "StreamHandle",
    "ConnectionCheck",
    # Requests / results
    "GenerationRequest",
    "ConversationTurn",
    "GenerationResult",
    "StreamUpdate",
    "ModelInfo",
    "BalanceInfo",
    # Configuration
    "ProviderConfig",
    "ProtocolSpec",
    "InMemoryProviderStore",
    "load_provider_configs",
    "preset_protocol",
    "preset_provider",
    # Exceptions
    "AdapterError",
    "ConfigurationError",
    "TransportError",
    "ErrorCode",
]
