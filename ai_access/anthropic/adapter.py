"""Anthropic Messages API chat adapter.

Payload shape (``POST v1/messages``)::

    {"model": ..., "messages": [{"role": "user"|"assistant", "content": ...}],
     "system": <instruction or "">, "max_tokens": <option or 1024>,
     "stop_sequences"?, "temperature"?, "top_k"?, "top_p"?}
"""

from __future__ import annotations

from typing import Any, Dict

from ..base.dto.chat_options import AnthropicChatOptions
from ..base.errors import ApiError, ErrorCode
from ..base.models import ChatResponse, ChatSession
from ..base.tokens import ANTHROPIC_USAGE_FIELDS, extract_usage
from ..base.utils import require_messages, role_messages, text_parts
from ..config.defaults import ANTHROPIC_DEFAULT_MAX_TOKENS

MESSAGES_ENDPOINT = "v1/messages"


class AnthropicMessagesAdapter:
    provider_name = "anthropic"
    options_type = AnthropicChatOptions

    def endpoint(self, session: ChatSession) -> str:
        return MESSAGES_ENDPOINT

    def build_payload(self, session: ChatSession) -> Dict[str, Any]:
        require_messages(session)
        options = session.option_values()
        payload: Dict[str, Any] = {
            "model": session.model,
            "messages": role_messages(session),
            "system": session.system_instruction or "",
            "max_tokens": options.pop("max_tokens", ANTHROPIC_DEFAULT_MAX_TOKENS),
        }
        payload.update(options)
        return payload

    def parse_response(self, raw: Any) -> ChatResponse:
        if not isinstance(raw, dict):
            raise ApiError(
                message="Unexpected Anthropic response format.",
                provider=self.provider_name,
                category=ErrorCode.INVALID_RESPONSE,
                raw=raw,
            )
        return ChatResponse(
            text=text_parts(raw.get("content"), wanted="text"),
            finish_reason=raw.get("stop_reason"),
            usage=extract_usage(raw, ANTHROPIC_USAGE_FIELDS),
            raw=raw,
        )


__all__ = ["AnthropicMessagesAdapter", "MESSAGES_ENDPOINT"]
