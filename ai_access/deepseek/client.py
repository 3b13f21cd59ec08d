"""DeepSeek client (Chat Completions compatible API).

``max_output_tokens`` is sent as ``max_tokens``. The ``deepseek-reasoner``
model rejects sampling and tool parameters, so they are dropped from its
payloads after the options are merged.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable

from ..base.client import BaseClient
from ..base.dto.chat_options import DeepSeekChatOptions
from ..base.http.transport import HeaderValue
from ..base.openai_style_parts import ChatCompletionsAdapter
from ..config.defaults import DEEPSEEK_DEFAULT_BASE_URL

REASONER_MODEL = "deepseek-reasoner"
REASONER_UNSUPPORTED_PARAMS: FrozenSet[str] = frozenset(
    {
        "temperature",
        "top_p",
        "frequency_penalty",
        "presence_penalty",
        "tools",
        "tool_choice",
        "logprobs",
        "top_logprobs",
    }
)


def unsupported_params(model: str) -> Iterable[str]:
    return REASONER_UNSUPPORTED_PARAMS if model == REASONER_MODEL else ()


class DeepSeekClient(BaseClient):
    provider_name = "deepseek"
    label = "DeepSeek"
    default_base_url = DEEPSEEK_DEFAULT_BASE_URL

    def _auth_headers(self) -> Dict[str, HeaderValue]:
        return {"Authorization": f"Bearer {self._api_key}"}

    def chat_adapter(self) -> ChatCompletionsAdapter:
        return ChatCompletionsAdapter(
            self.provider_name,
            DeepSeekChatOptions,
            token_param="max_tokens",
            unsupported_params=unsupported_params,
        )


__all__ = ["DeepSeekClient", "REASONER_MODEL", "REASONER_UNSUPPORTED_PARAMS"]
