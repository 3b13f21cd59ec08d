"""Gemini client.

Chat through ``generateContent`` and embeddings through
``batchEmbedContents``. Batch jobs are not offered.

Authentication uses the ``key`` query parameter. The key is appended to the
request URL only; logged URLs are stripped of their query string.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import quote

from ..base.client import BaseClient
from ..base.constants import DIAG_EMBEDDING_COUNT_MISMATCH
from ..base.models import Embedding
from ..base.utils import require_embedding_inputs
from ..config.defaults import GEMINI_DEFAULT_BASE_URL
from .adapter import GeminiChatAdapter


class GeminiClient(BaseClient):
    """Client for the Gemini (Generative Language) HTTP API."""

    provider_name = "gemini"
    label = "Gemini"
    default_base_url = GEMINI_DEFAULT_BASE_URL

    def _build_url(self, endpoint: str) -> str:
        url = super()._build_url(endpoint)
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}key={quote(self._api_key, safe='')}"

    def chat_adapter(self) -> GeminiChatAdapter:
        return GeminiChatAdapter(self.report)

    def calculate_embeddings(
        self,
        model: str,
        inputs: Sequence[str],
        *,
        output_dimensionality: Optional[int] = None,
        task_type: Optional[str] = None,
    ) -> List[Embedding]:
        """Return one embedding per input, in input order.

        Args:
            model: Embedding model (e.g. ``"text-embedding-004"``).
            inputs: Non-empty list of non-empty strings.
            output_dimensionality: Optional reduced dimension of the vectors.
            task_type: Optional task hint (e.g. ``"RETRIEVAL_DOCUMENT"``).

        Raises:
            LogicError: When ``inputs`` is empty or holds an empty/non-string item.
        """
        items = require_embedding_inputs(inputs)
        requests: List[Dict[str, Any]] = []
        for text in items:
            request: Dict[str, Any] = {"model": f"models/{model}", "content": {"parts": [{"text": text}]}}
            if output_dimensionality is not None:
                request["outputDimensionality"] = output_dimensionality
            if task_type is not None:
                request["taskType"] = task_type
            requests.append(request)

        response = self.send_request(f"models/{model}:batchEmbedContents", {"requests": requests})
        embeddings = response.get("embeddings") if isinstance(response, dict) else None
        results = [
            Embedding(e["values"])
            for e in embeddings or ()
            if isinstance(e, dict) and isinstance(e.get("values"), list)
        ]
        if len(results) != len(items):
            self.report(
                DIAG_EMBEDDING_COUNT_MISMATCH,
                f"Number of returned embeddings ({len(results)}) does not match the number of inputs ({len(items)}).",
                expected=len(items),
                received=len(results),
            )
        return results


__all__ = ["GeminiClient"]
