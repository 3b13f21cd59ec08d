"""
Provider-agnostic interfaces (Protocols) for the client layer.

Re-exports the single-class modules under
``ai_access.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import (
    ChatAdapter,
    DiagnosticSink,
    SupportsBatches,
    SupportsEmbeddings,
)

__all__ = [
    "ChatAdapter",
    "DiagnosticSink",
    "SupportsBatches",
    "SupportsEmbeddings",
]
