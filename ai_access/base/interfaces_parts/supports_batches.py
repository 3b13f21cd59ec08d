"""SupportsBatches Protocol (single-class module).

Capability of clients that can submit asynchronous batch jobs.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol, runtime_checkable

from ..models import BatchResponse, Message


@runtime_checkable
class SupportsBatches(Protocol):
    """Batch job lifecycle operations.

    ``submit_batch`` receives the already built per-chat payloads keyed by
    custom id (insertion order preserved).
    """

    def create_batch(self) -> Any:  # pragma: no cover - interface
        """Return a new, empty ``Batch`` bound to this client."""
        ...

    def submit_batch(
        self, requests: Mapping[str, Dict[str, Any]], metadata: Optional[Dict[str, str]] = None
    ) -> BatchResponse:  # pragma: no cover - interface
        ...

    def retrieve_batch(self, batch_id: str) -> BatchResponse:  # pragma: no cover - interface
        ...

    def fetch_results(self, batch: BatchResponse) -> Optional[Dict[str, Message]]:  # pragma: no cover - interface
        ...

    def cancel_batch(self, batch_id: str) -> bool:  # pragma: no cover - interface
        ...

    def list_batches(self, limit: Optional[int] = None, **cursor: Optional[str]) -> List[BatchResponse]:  # pragma: no cover - interface
        ...
