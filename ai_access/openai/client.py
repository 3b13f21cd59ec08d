"""OpenAI client.

Purpose
-------
Chat through the Responses API, batch jobs through the Batch API (JSONL
input file uploaded with ``POST files``, then ``POST batches``) and
embeddings through ``POST embeddings``. Request execution and error
normalization are inherited from :class:`BaseClient`.

Authentication
--------------
``Authorization: Bearer <key>`` plus ``OpenAI-Organization`` when an
organization id was configured with ``set_options(organization_id=...)``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence
from urllib.parse import urlencode

from ..base.batch import Batch
from ..base.constants import (
    DIAG_BATCH_CANCEL_FAILED,
    DIAG_BATCH_RESULTS_MISSING,
    DIAG_EMBEDDING_COUNT_MISMATCH,
    DIAG_EMBEDDING_DIMENSIONS_UNSUPPORTED,
    DIAG_EMBEDDING_ITEM_FAILED,
)
from ..base.client import BaseClient
from ..base.dto.client_options import OpenAIClientOptions
from ..base.errors import ApiError
from ..base.http.multipart import encode_multipart
from ..base.http.transport import HeaderValue
from ..base.models import BatchResponse, BatchStatus, Embedding, Message
from ..base.utils import require_embedding_inputs
from ..config.defaults import OPENAI_BATCH_COMPLETION_WINDOW, OPENAI_BATCH_ENDPOINT, OPENAI_DEFAULT_BASE_URL
from .adapter import OpenAIResponsesAdapter
from .batch_helpers import build_batch_document, parse_batch_results, to_batch_response

BATCH_FILENAME = "batch_requests.jsonl"


class OpenAIClient(BaseClient):
    """Client for the OpenAI HTTP API."""

    provider_name = "openai"
    label = "OpenAI"
    default_base_url = OPENAI_DEFAULT_BASE_URL
    client_options_type = OpenAIClientOptions

    def _auth_headers(self) -> Dict[str, HeaderValue]:
        headers: Dict[str, HeaderValue] = {"Authorization": f"Bearer {self._api_key}"}
        if org := self._settings.get("organization_id"):
            headers["OpenAI-Organization"] = org
        return headers

    def chat_adapter(self) -> OpenAIResponsesAdapter:
        return OpenAIResponsesAdapter()

    # ------------------------------------------------------------- embeddings
    def calculate_embeddings(
        self,
        model: str,
        inputs: Sequence[str],
        *,
        dimensions: Optional[int] = None,
    ) -> List[Embedding]:
        """Return one embedding per input, in input order.

        Items the API reports as failed are skipped with a diagnostic; a
        count mismatch between inputs and results is also reported.

        Raises:
            LogicError: When ``inputs`` is empty or holds an empty/non-string item.
        """
        items = require_embedding_inputs(inputs)
        payload: Dict[str, Any] = {"model": model, "input": items}
        if dimensions is not None:
            if "text-embedding-3" not in model:
                self.report(
                    DIAG_EMBEDDING_DIMENSIONS_UNSUPPORTED,
                    "The 'dimensions' parameter is only supported for text-embedding-3 models.",
                    model=model,
                )
            payload["dimensions"] = dimensions

        response = self.send_request("embeddings", payload)
        data = response.get("data") if isinstance(response, dict) else None
        results: List[Embedding] = []
        if isinstance(data, list):
            entries = [d for d in data if isinstance(d, dict)]
            entries.sort(key=lambda d: d.get("index") if isinstance(d.get("index"), int) else 0)
            for entry in entries:
                vector = entry.get("embedding")
                if isinstance(vector, list):
                    results.append(Embedding(vector))
                elif entry.get("error") is not None:
                    error = entry["error"]
                    message = error.get("message") if isinstance(error, dict) else str(error)
                    self.report(
                        DIAG_EMBEDDING_ITEM_FAILED,
                        f"Error processing input at index {entry.get('index')}: {message or 'Unknown error'}",
                        index=entry.get("index"),
                    )

        if len(results) != len(items):
            self.report(
                DIAG_EMBEDDING_COUNT_MISMATCH,
                f"Number of returned embeddings ({len(results)}) does not match the number of inputs ({len(items)}).",
                expected=len(items),
                received=len(results),
            )
        return results

    # ---------------------------------------------------------------- batches
    def create_batch(self) -> Batch:
        return Batch(self)

    def upload_content(self, content: str, filename: str, purpose: str, content_type: str = "application/jsonl") -> str:
        """Upload ``content`` as a file and return the new file id.

        Raises:
            ApiError: When the upload fails or the response carries no id.
        """
        body, multipart_type = encode_multipart({"purpose": purpose}, "file", filename, content, content_type)
        response = self.send_request("files", body, extra_headers={"Content-Type": multipart_type})
        file_id = response.get("id") if isinstance(response, dict) else None
        if not isinstance(file_id, str) or not file_id:
            raise ApiError(message="Failed to upload file: response contains no file id.", provider=self.provider_name, raw=response)
        return file_id

    def submit_batch(
        self, requests: Mapping[str, Dict[str, Any]], metadata: Optional[Dict[str, str]] = None
    ) -> BatchResponse:
        """Upload the requests as JSONL and create the batch job."""
        document = build_batch_document(requests)
        file_id = self.upload_content(document, BATCH_FILENAME, "batch", "text/jsonl")
        payload: Dict[str, Any] = {
            "input_file_id": file_id,
            "endpoint": OPENAI_BATCH_ENDPOINT,
            "completion_window": OPENAI_BATCH_COMPLETION_WINDOW,
        }
        if metadata is not None:
            payload["metadata"] = metadata
        return to_batch_response(self.send_request("batches", payload), self.fetch_results)

    def retrieve_batch(self, batch_id: str) -> BatchResponse:
        return to_batch_response(self.send_request(f"batches/{batch_id}", method="GET"), self.fetch_results)

    def list_batches(self, limit: Optional[int] = None, after: Optional[str] = None) -> List[BatchResponse]:
        """Return batch jobs, newest first, as reported by the API."""
        query = {k: v for k, v in {"limit": limit, "after": after}.items() if v is not None}
        endpoint = "batches" + (f"?{urlencode(query)}" if query else "")
        response = self.send_request(endpoint, method="GET")
        data = response.get("data") if isinstance(response, dict) else None
        return [to_batch_response(item, self.fetch_results) for item in data or () if isinstance(item, dict)]

    def cancel_batch(self, batch_id: str) -> bool:
        """Request cancellation; ``False`` (plus a diagnostic) when the API refuses."""
        try:
            response = self.send_request(f"batches/{batch_id}/cancel")
        except ApiError as exc:
            self.report(DIAG_BATCH_CANCEL_FAILED, f"Cannot cancel batch '{batch_id}': {exc.message}", batch_id=batch_id, status=exc.code)
            return False
        return isinstance(response, dict) and response.get("status") in ("cancelling", "cancelled")

    def fetch_results(self, batch: BatchResponse) -> Optional[Dict[str, Message]]:
        """Download and parse the output file of a completed batch."""
        if batch.status is not BatchStatus.COMPLETED:
            return None
        raw = batch.raw if isinstance(batch.raw, dict) else {}
        file_id = raw.get("output_file_id")
        if not file_id:
            self.report(DIAG_BATCH_RESULTS_MISSING, f"Batch '{batch.id}' has no output file.", batch_id=batch.id)
            return None
        text = self.send_request(f"files/{file_id}/content", method="GET", expect_json=False)
        if not isinstance(text, str):
            return None
        return parse_batch_results(text, self.chat_adapter().parse_response, self.report)


__all__ = ["OpenAIClient"]
