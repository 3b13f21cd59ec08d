"""Anthropic client.

Chat through the Messages API and batch jobs through Message Batches (all
requests sent inline in one ``POST v1/messages/batches``). Embeddings are not
offered by this provider.

Authentication: ``x-api-key`` plus the ``anthropic-version`` header
(default ``2023-06-01``; change with ``set_options(api_version=...)``).
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import urlencode

from ..base.batch import Batch
from ..base.constants import (
    DIAG_BATCH_CANCEL_FAILED,
    DIAG_BATCH_METADATA_UNSUPPORTED,
    DIAG_BATCH_RESULTS_MISSING,
)
from ..base.client import BaseClient
from ..base.dto.client_options import AnthropicClientOptions
from ..base.errors import ApiError
from ..base.http.transport import HeaderValue, Transport
from ..base.interfaces import DiagnosticSink
from ..base.models import BatchResponse, BatchStatus, Message
from ..config.defaults import ANTHROPIC_DEFAULT_API_VERSION, ANTHROPIC_DEFAULT_BASE_URL
from .adapter import AnthropicMessagesAdapter
from .batch_helpers import build_batch_requests, parse_batch_results, to_batch_response

BATCHES_ENDPOINT = "v1/messages/batches"


class AnthropicClient(BaseClient):
    """Client for the Anthropic HTTP API."""

    provider_name = "anthropic"
    label = "Anthropic"
    default_base_url = ANTHROPIC_DEFAULT_BASE_URL
    client_options_type = AnthropicClientOptions

    def __init__(
        self,
        api_key: str,
        transport: Transport,
        *,
        diagnostics: Optional[DiagnosticSink] = None,
        base_url: Optional[str] = None,
    ) -> None:
        super().__init__(api_key, transport, diagnostics=diagnostics, base_url=base_url)
        self._settings["api_version"] = ANTHROPIC_DEFAULT_API_VERSION

    @property
    def api_version(self) -> str:
        return self._settings["api_version"]

    def _auth_headers(self) -> Dict[str, HeaderValue]:
        return {"x-api-key": self._api_key}

    def _vendor_headers(self) -> Dict[str, HeaderValue]:
        return {"anthropic-version": self.api_version}

    def chat_adapter(self) -> AnthropicMessagesAdapter:
        return AnthropicMessagesAdapter()

    # ---------------------------------------------------------------- batches
    def create_batch(self) -> Batch:
        return Batch(self)

    def submit_batch(
        self, requests: Mapping[str, Dict[str, Any]], metadata: Optional[Dict[str, str]] = None
    ) -> BatchResponse:
        """Create the batch job with every request inline."""
        if metadata is not None:
            self.report(
                DIAG_BATCH_METADATA_UNSUPPORTED,
                "Anthropic message batches do not support metadata; it was ignored.",
                keys=sorted(metadata),
            )
        response = self.send_request(BATCHES_ENDPOINT, {"requests": build_batch_requests(requests)})
        return to_batch_response(response, self.fetch_results)

    def retrieve_batch(self, batch_id: str) -> BatchResponse:
        return to_batch_response(self.send_request(f"{BATCHES_ENDPOINT}/{batch_id}", method="GET"), self.fetch_results)

    def list_batches(
        self,
        limit: Optional[int] = None,
        after_id: Optional[str] = None,
        before_id: Optional[str] = None,
    ) -> List[BatchResponse]:
        params = {"limit": limit, "after_id": after_id, "before_id": before_id}
        query = {k: v for k, v in params.items() if v is not None}
        endpoint = BATCHES_ENDPOINT + (f"?{urlencode(query)}" if query else "")
        response = self.send_request(endpoint, method="GET")
        data = response.get("data") if isinstance(response, dict) else None
        return [to_batch_response(item, self.fetch_results) for item in data or () if isinstance(item, dict)]

    def cancel_batch(self, batch_id: str) -> bool:
        """Request cancellation; ``False`` (plus a diagnostic) when the API refuses."""
        try:
            response = self.send_request(f"{BATCHES_ENDPOINT}/{batch_id}/cancel")
        except ApiError as exc:
            self.report(DIAG_BATCH_CANCEL_FAILED, f"Failed to cancel batch job {batch_id}: {exc.message}", batch_id=batch_id, status=exc.code)
            return False
        return isinstance(response, dict) and response.get("cancel_initiated_at") is not None

    def fetch_results(self, batch: BatchResponse) -> Optional[Dict[str, Message]]:
        """Download and parse the results of an ended batch."""
        if batch.status is not BatchStatus.COMPLETED:
            return None
        raw = batch.raw if isinstance(batch.raw, dict) else {}
        url = raw.get("results_url")
        if not url:
            self.report(DIAG_BATCH_RESULTS_MISSING, f"Batch '{batch.id}' has no results URL.", batch_id=batch.id)
            return None
        text = self.send_request(url, method="GET", expect_json=False)
        if not isinstance(text, str):
            return None
        return parse_batch_results(text, self.chat_adapter().parse_response, self.report)


__all__ = ["AnthropicClient"]
