"""ai_access package

One consistent client abstraction over several AI provider HTTP APIs
(OpenAI, Anthropic, Gemini, DeepSeek, xAI): chat sessions with rollback on
failure, asynchronous batch jobs and embeddings.

Public API (re-exported):
    - Version: ``__version__``
    - Factory: :func:`create_client`, :class:`ClientFactory`
    - Clients: :class:`OpenAIClient`, :class:`AnthropicClient`,
      :class:`GeminiClient`, :class:`DeepSeekClient`, :class:`XAIClient`
    - Transport: :class:`Transport`, :class:`HttpxTransport`,
      :class:`HttpResponse`, :class:`TransportOptions`
    - Values: :class:`Message`, :class:`Role`, :class:`ChatResponse`,
      :class:`Embedding`, :class:`BatchResponse`, :class:`BatchStatus`,
      :class:`Diagnostic`
    - Errors: :class:`AccessError`, :class:`LogicError`, :class:`ApiError`,
      :class:`NetworkError`, :class:`ErrorCode`
    - Logging: :func:`configure_logger`

Example::

    from ai_access import HttpxTransport, create_client

    with HttpxTransport() as transport:
        client = create_client("openai", transport)
        chat = client.create_chat("gpt-4o-mini")
        print(chat.send_message("Hello").text)
"""

from .base import (
    AccessError,
    ApiError,
    Batch,
    BaseClient,
    BatchResponse,
    BatchStatus,
    Chat,
    ChatResponse,
    ClientFactory,
    Diagnostic,
    DiagnosticsCollector,
    Embedding,
    ErrorCode,
    HttpResponse,
    HttpxTransport,
    LogicError,
    Message,
    NetworkError,
    Role,
    Transport,
    TransportOptions,
    UnknownProviderError,
    create_client,
)
from .base.logging import configure_logger
from .config.defaults import LIBRARY_VERSION as __version__
from .anthropic import AnthropicClient
from .deepseek import DeepSeekClient
from .gemini import GeminiClient
from .openai import OpenAIClient
from .xai import XAIClient

__all__ = [
    "__version__",
    "AccessError",
    "ApiError",
    "Batch",
    "BaseClient",
    "BatchResponse",
    "BatchStatus",
    "Chat",
    "ChatResponse",
    "ClientFactory",
    "Diagnostic",
    "DiagnosticsCollector",
    "Embedding",
    "ErrorCode",
    "HttpResponse",
    "HttpxTransport",
    "LogicError",
    "Message",
    "NetworkError",
    "Role",
    "Transport",
    "TransportOptions",
    "UnknownProviderError",
    "create_client",
    "configure_logger",
    "AnthropicClient",
    "DeepSeekClient",
    "GeminiClient",
    "OpenAIClient",
    "XAIClient",
]
