"""
BatchResponse: client-side view of a remote batch job.

Produced by ``submit()``, ``retrieve_batch()`` and ``list_batches()``. The
object only describes status; results are pulled in a separate step through
:meth:`BatchResponse.get_output_messages`, which delegates to the client that
created it (and may download a result file).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .batch_status import BatchStatus
from .message import Message

ResultsFetcher = Callable[["BatchResponse"], Optional[Dict[str, Message]]]


@dataclass
class BatchResponse:
    """Status snapshot of a batch job.

    Attributes:
        id: Remote batch job identifier.
        status: Normalized :class:`BatchStatus`.
        error: Human readable failure description when the vendor supplied one.
        raw: Decoded vendor payload.
        provider: Provider key that owns the job.
        fetcher: Callable pulling the results; set by the owning client.
    """

    id: str
    status: BatchStatus
    error: Optional[str] = None
    raw: Any = None
    provider: Optional[str] = None
    fetcher: Optional[ResultsFetcher] = field(default=None, repr=False, compare=False)

    def get_id(self) -> str:
        return self.id

    def get_status(self) -> BatchStatus:
        return self.status

    def get_error(self) -> Optional[str]:
        return self.error

    def get_raw_response(self) -> Any:
        return self.raw

    def get_output_messages(self) -> Optional[Dict[str, Message]]:
        """Return the model output of each request keyed by ``custom_id``.

        Returns ``None`` when the results cannot be located or parsed (which
        includes jobs that are not completed yet). Readiness is the caller's
        responsibility: poll ``retrieve_batch`` until the status is
        :attr:`BatchStatus.COMPLETED` first.
        """
        if self.fetcher is None:
            return None
        return self.fetcher(self)


__all__ = ["BatchResponse", "ResultsFetcher"]
