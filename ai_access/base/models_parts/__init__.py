"""Models parts package.

One-class-per-file DTO implementations re-exported by
``ai_access.base.models``.
"""

from .message import Message, Role
from .embedding import Embedding
from .chat_response import ChatResponse
from .chat_session import ChatSession
from .batch_status import BatchStatus
from .batch_response import BatchResponse, ResultsFetcher
from .diagnostic import Diagnostic

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
