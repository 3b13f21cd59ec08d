"""Anthropic Message Batches helpers.

``processing_status`` vocabulary: ``in_progress`` and ``canceling`` map to
``IN_PROGRESS``; ``ended`` maps to ``COMPLETED`` unless no request
succeeded, in which case the job is ``FAILED``; anything else is ``OTHER``.

Results are a JSONL document at ``results_url``; each line carries a
``custom_id`` and a ``result`` whose ``type`` is ``succeeded``, ``errored``,
``canceled`` or ``expired``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from ..base.errors import ApiError
from ..base.constants import DIAG_BATCH_REQUEST_FAILED, DIAG_BATCH_RESULT_UNPARSEABLE
from ..base.jsonl import iter_jsonl
from ..base.models import BatchResponse, BatchStatus, ChatResponse, Message, ResultsFetcher, Role
from ..base.tokens import dig

_IN_PROGRESS = frozenset({"in_progress", "canceling"})
_UNSUCCESSFUL_COUNTS = ("errored", "canceled", "expired")

Reporter = Callable[..., None]


def build_batch_requests(requests: Mapping[str, Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [{"custom_id": custom_id, "params": params} for custom_id, params in requests.items()]


def _status_and_error(raw: Mapping[str, Any]) -> Tuple[BatchStatus, Optional[str]]:
    status = raw.get("processing_status")
    if status in _IN_PROGRESS:
        return BatchStatus.IN_PROGRESS, None
    if status != "ended":
        return BatchStatus.OTHER, None
    counts = raw.get("request_counts")
    if isinstance(counts, dict) and counts.get("succeeded", 0) == 0:
        failed = {k: counts.get(k, 0) for k in _UNSUCCESSFUL_COUNTS}
        if any(failed.values()):
            details = ", ".join(f"{v} {k}" for k, v in failed.items())
            return BatchStatus.FAILED, f"No request in the batch succeeded ({details})."
    return BatchStatus.COMPLETED, None


def to_batch_response(raw: Any, fetcher: Optional[ResultsFetcher] = None) -> BatchResponse:
    data = raw if isinstance(raw, dict) else {}
    status, error = _status_and_error(data)
    return BatchResponse(
        id=str(data.get("id") or ""),
        status=status,
        error=error,
        raw=raw,
        provider="anthropic",
        fetcher=fetcher,
    )


def parse_batch_results(
    text: str,
    parse_message: Callable[[Any], ChatResponse],
    report: Reporter,
) -> Optional[Dict[str, Message]]:
    """Parse the results document into ``custom_id -> Message``.

    Non-succeeded results and undecodable lines are skipped with a
    diagnostic. Returns ``None`` when no line could be decoded.
    """
    results: Dict[str, Message] = {}
    decoded = 0

    def _bad_line(number: int, exc: Exception) -> None:
        report(DIAG_BATCH_RESULT_UNPARSEABLE, f"Cannot decode batch result line {number}: {exc}", line=number)

    for number, record in iter_jsonl(text, on_error=_bad_line):
        decoded += 1
        custom_id = record.get("custom_id") if isinstance(record, dict) else None
        if not custom_id:
            report(DIAG_BATCH_RESULT_UNPARSEABLE, f"Batch result line {number} has no custom_id.", line=number)
            continue
        result_type = dig(record, ("result", "type"))
        if result_type != "succeeded":
            message = dig(record, ("result", "error", "error", "message")) or dig(record, ("result", "error", "message"))
            report(
                DIAG_BATCH_REQUEST_FAILED,
                f"Batch request '{custom_id}' did not succeed ({result_type}): {message or 'no details'}",
                custom_id=custom_id,
                result_type=result_type,
            )
            continue
        try:
            response = parse_message(dig(record, ("result", "message")))
        except ApiError as exc:
            report(DIAG_BATCH_RESULT_UNPARSEABLE, f"Batch result '{custom_id}' has an unexpected body: {exc}", custom_id=custom_id)
            continue
        results[custom_id] = Message(response.text, Role.MODEL)

    return results if decoded else None


__all__ = ["build_batch_requests", "to_batch_response", "parse_batch_results"]
