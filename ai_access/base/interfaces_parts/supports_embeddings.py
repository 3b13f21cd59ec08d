"""SupportsEmbeddings Protocol (single-class module)."""

from __future__ import annotations

from typing import Any, List, Protocol, Sequence, runtime_checkable

from ..models import Embedding


@runtime_checkable
class SupportsEmbeddings(Protocol):
    """Capability of clients that compute embedding vectors.

    ``inputs`` must be a non-empty sequence of non-empty strings; results are
    returned in input order.
    """

    def calculate_embeddings(self, model: str, inputs: Sequence[str], **options: Any) -> List[Embedding]:  # pragma: no cover - interface
        ...
