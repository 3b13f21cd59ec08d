"""xAI (Grok) client (Chat Completions compatible API).

``max_output_tokens`` is sent as ``max_completion_tokens``.
"""

from __future__ import annotations

from typing import Dict

from ..base.client import BaseClient
from ..base.dto.chat_options import XAIChatOptions
from ..base.http.transport import HeaderValue
from ..base.openai_style_parts import ChatCompletionsAdapter
from ..config.defaults import XAI_DEFAULT_BASE_URL


class XAIClient(BaseClient):
    provider_name = "xai"
    label = "xAI"
    default_base_url = XAI_DEFAULT_BASE_URL

    def _auth_headers(self) -> Dict[str, HeaderValue]:
        return {"Authorization": f"Bearer {self._api_key}"}

    def chat_adapter(self) -> ChatCompletionsAdapter:
        return ChatCompletionsAdapter(self.provider_name, XAIChatOptions, token_param="max_completion_tokens")


__all__ = ["XAIClient"]
