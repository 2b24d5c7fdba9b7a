"""Protocol translation: templates, paths, messages, requests and stream decoding.

Every module here is pure with respect to the network; the adapter wires them
to a ``Transport``.
"""

from .template import resolve, stringify, substitute
from .paths import MISSING, get_path, set_path
from .structure import generate
from .messages import build_messages, build_structured_messages
from .request_builder import build_request
from .response import error_message, extract_content, extract_reasoning
from .stream_decoder import CANCELLED_MESSAGE, DecoderState, StreamDecoder
from .model_listing import fetch_models, parse_models
from .balance import fetch_balance, parse_balance

__all__ = [
    "resolve",
    "stringify",
    "substitute",
    "MISSING",
    "get_path",
    "set_path",
    "generate",
    "build_messages",
    "build_structured_messages",
    "build_request",
    "error_message",
    "extract_content",
    "extract_reasoning",
    "CANCELLED_MESSAGE",
    "DecoderState",
    "StreamDecoder",
    "fetch_models",
    "parse_models",
    "fetch_balance",
    "parse_balance",
]
