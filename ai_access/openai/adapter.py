"""OpenAI Responses API chat adapter.

Translates a :class:`ChatSession` into a ``POST responses`` body and the
decoded response object into a :class:`ChatResponse`.

Payload shape::

    {"model": ..., "input": [{"role": "user"|"assistant", "content": ...}],
     "instructions": ...,          # only when a system instruction is set
     **options}                    # max_output_tokens, temperature, ...
"""

from __future__ import annotations

from typing import Any, Dict

from ..base.dto.chat_options import OpenAIChatOptions
from ..base.errors import ApiError, ErrorCode
from ..base.models import ChatResponse, ChatSession
from ..base.tokens import OPENAI_RESPONSES_USAGE_FIELDS, dig, extract_usage
from ..base.utils import require_messages, role_messages, text_parts

RESPONSES_ENDPOINT = "responses"


class OpenAIResponsesAdapter:
    provider_name = "openai"
    options_type = OpenAIChatOptions

    def endpoint(self, session: ChatSession) -> str:
        return RESPONSES_ENDPOINT

    def build_payload(self, session: ChatSession) -> Dict[str, Any]:
        require_messages(session)
        payload: Dict[str, Any] = {"model": session.model, "input": role_messages(session)}
        if session.system_instruction is not None:
            payload["instructions"] = session.system_instruction
        payload.update(session.option_values())
        return payload

    def parse_response(self, raw: Any) -> ChatResponse:
        if not isinstance(raw, dict):
            raise ApiError(
                message="Unexpected OpenAI response format.",
                provider=self.provider_name,
                category=ErrorCode.INVALID_RESPONSE,
                raw=raw,
            )
        text = "".join(
            text_parts(item.get("content"), wanted="output_text")
            for item in raw.get("output") or ()
            if isinstance(item, dict) and item.get("type") == "message"
        )
        return ChatResponse(
            text=text,
            finish_reason=dig(raw, ("incomplete_details", "reason")) or raw.get("status"),
            usage=extract_usage(raw, OPENAI_RESPONSES_USAGE_FIELDS),
            raw=raw,
        )


__all__ = ["OpenAIResponsesAdapter", "RESPONSES_ENDPOINT"]
