"""
Client Base Package

Exports the provider-agnostic building blocks shared by every provider
client:

- Models: messages, chat responses, batch status, embeddings, diagnostics
- Errors: ``AccessError`` taxonomy and status classification
- Chat / Batch: the session state machine and the batch builder
- Client: request execution and response normalization
- Factory: lazy creation of provider clients by canonical name
"""

from .batch import Batch
from .chat import Chat
from .client import BaseClient
from .diagnostics import DiagnosticsCollector
from .errors import AccessError, ApiError, ErrorCode, LogicError, NetworkError
from .factory import ClientFactory, UnknownProviderError, create_client
from .http import HttpResponse, HttpxTransport, Transport, TransportOptions
from .interfaces import ChatAdapter, DiagnosticSink, SupportsBatches, SupportsEmbeddings
from .models import (
    BatchResponse,
    BatchStatus,
    ChatResponse,
    ChatSession,
    Diagnostic,
    Embedding,
    Message,
    Role,
)

__all__ = [
    "Batch",
    "Chat",
    "BaseClient",
    "DiagnosticsCollector",
    "AccessError",
    "ApiError",
    "ErrorCode",
    "LogicError",
    "NetworkError",
    "ClientFactory",
    "UnknownProviderError",
    "create_client",
    "HttpResponse",
    "HttpxTransport",
    "Transport",
    "TransportOptions",
    "ChatAdapter",
    "DiagnosticSink",
    "SupportsBatches",
    "SupportsEmbeddings",
    "BatchResponse",
    "BatchStatus",
    "ChatResponse",
    "ChatSession",
    "Diagnostic",
    "Embedding",
    "Message",
    "Role",
]
