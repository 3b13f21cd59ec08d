"""OpenAI Batch API helpers.

Purpose
-------
Pure functions shared by :class:`~ai_access.openai.client.OpenAIClient` for
the batch lifecycle: building the JSONL input document, mapping job objects
to :class:`BatchResponse` and parsing the output file.

Job status vocabulary
---------------------
``validating``, ``in_progress``, ``finalizing``, ``cancelling`` map to
``IN_PROGRESS``; ``completed`` to ``COMPLETED``; ``failed``, ``expired`` and
``cancelled`` to ``FAILED``; anything else to ``OTHER``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from ..base.errors import ApiError
from ..base.constants import DIAG_BATCH_REQUEST_FAILED, DIAG_BATCH_RESULT_UNPARSEABLE
from ..base.jsonl import dumps_jsonl, iter_jsonl
from ..base.models import BatchResponse, BatchStatus, ChatResponse, Message, ResultsFetcher, Role
from ..base.tokens import dig
from ..config.defaults import OPENAI_BATCH_ENDPOINT

BATCH_STATUS_MAP: Dict[str, BatchStatus] = {
    "validating": BatchStatus.IN_PROGRESS,
    "in_progress": BatchStatus.IN_PROGRESS,
    "finalizing": BatchStatus.IN_PROGRESS,
    "cancelling": BatchStatus.IN_PROGRESS,
    "completed": BatchStatus.COMPLETED,
    "failed": BatchStatus.FAILED,
    "expired": BatchStatus.FAILED,
    "cancelled": BatchStatus.FAILED,
}

Reporter = Callable[..., None]


def build_batch_document(requests: Mapping[str, Dict[str, Any]], endpoint: str = OPENAI_BATCH_ENDPOINT) -> str:
    """Return the JSONL input file, one request per line in insertion order."""
    return dumps_jsonl(
        {"custom_id": custom_id, "method": "POST", "url": endpoint, "body": body}
        for custom_id, body in requests.items()
    )


def batch_error(raw: Mapping[str, Any]) -> Optional[str]:
    message = dig(raw, ("errors", "data", 0, "message"))
    return message if isinstance(message, str) else None


def to_batch_response(raw: Any, fetcher: Optional[ResultsFetcher] = None) -> BatchResponse:
    data = raw if isinstance(raw, dict) else {}
    return BatchResponse(
        id=str(data.get("id") or ""),
        status=BATCH_STATUS_MAP.get(str(data.get("status")), BatchStatus.OTHER),
        error=batch_error(data),
        raw=raw,
        provider="openai",
        fetcher=fetcher,
    )


def parse_batch_results(
    text: str,
    parse_body: Callable[[Any], ChatResponse],
    report: Reporter,
) -> Optional[Dict[str, Message]]:
    """Parse the output file into ``custom_id -> Message``.

    Lines that cannot be decoded, failed requests and bodies without text are
    skipped with a diagnostic. Returns ``None`` when no line could be decoded.
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
        status_code = dig(record, ("response", "status_code"))
        if record.get("error") or not isinstance(status_code, int) or status_code >= 400:
            message = dig(record, ("error", "message")) or dig(record, ("response", "body", "error", "message"))
            report(
                DIAG_BATCH_REQUEST_FAILED,
                f"Batch request '{custom_id}' failed: {message or 'unknown error'}",
                custom_id=custom_id,
                status_code=status_code,
            )
            continue
        try:
            response = parse_body(dig(record, ("response", "body")))
        except ApiError as exc:
            report(DIAG_BATCH_RESULT_UNPARSEABLE, f"Batch result '{custom_id}' has an unexpected body: {exc}", custom_id=custom_id)
            continue
        results[custom_id] = Message(response.text, Role.MODEL)

    return results if decoded else None


__all__ = [
    "BATCH_STATUS_MAP",
    "build_batch_document",
    "batch_error",
    "to_batch_response",
    "parse_batch_results",
]
