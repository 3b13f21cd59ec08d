"""Small side-effect free helpers shared by provider adapters."""

from .embeddings import require_embedding_inputs
from .messages import EMPTY_HISTORY_ERROR, require_messages, role_messages, text_parts

__all__ = [
    "EMPTY_HISTORY_ERROR",
    "require_embedding_inputs",
    "require_messages",
    "role_messages",
    "text_parts",
]
