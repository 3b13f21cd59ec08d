"""
Provider-agnostic domain models public surface.

This module re-exports the one-class-per-file implementations under
``ai_access.base.models_parts`` to keep imports short and stable.
"""

from .models_parts.message import Message, Role
from .models_parts.embedding import Embedding
from .models_parts.chat_response import ChatResponse
from .models_parts.chat_session import ChatSession
from .models_parts.batch_status import BatchStatus
from .models_parts.batch_response import BatchResponse, ResultsFetcher
from .models_parts.diagnostic import Diagnostic

__all__ = [
    "Message",
    "Role",
    "Embedding",
    "ChatResponse",
    "ChatSession",
    "BatchStatus",
    "BatchResponse",
    "ResultsFetcher",
    "Diagnostic",
]
