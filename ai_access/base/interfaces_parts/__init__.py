"""Interfaces (Protocols) split into single-class modules.

``ai_access.base.interfaces`` re-exports them as the stable import surface.
"""

from .chat_adapter import ChatAdapter
from .diagnostic_sink import DiagnosticSink
from .supports_batches import SupportsBatches
from .supports_embeddings import SupportsEmbeddings

__all__ = [
    "ChatAdapter",
    "DiagnosticSink",
    "SupportsBatches",
    "SupportsEmbeddings",
]
