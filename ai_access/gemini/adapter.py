"""Gemini ``generateContent`` chat adapter.

Payload shape (``POST models/{model}:generateContent``)::

    {"contents": [{"role": "user"|"model", "parts": [{"text": ...}]}],
     "systemInstruction"?: {"parts": [{"text": ...}]},
     "generationConfig"?: {"temperature", "maxOutputTokens", "topP", "topK", "stopSequences"},
     "safetySettings"?: [...]}

The conversation must start with a user message. Consecutive messages with
the same role are sent as-is and reported as a diagnostic.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from ..base.dto.chat_options import GeminiChatOptions
from ..base.constants import DIAG_CHAT_CONSECUTIVE_ROLES
from ..base.errors import ApiError, ErrorCode, LogicError
from ..base.models import ChatResponse, ChatSession, Role
from ..base.tokens import GEMINI_USAGE_FIELDS, dig, extract_usage
from ..base.utils import require_messages

Reporter = Callable[..., None]

GENERATION_CONFIG_FIELDS = {
    "temperature": "temperature",
    "max_output_tokens": "maxOutputTokens",
    "top_p": "topP",
    "top_k": "topK",
    "stop_sequences": "stopSequences",
}


def _ignore(code: str, message: str, **context: Any) -> None:
    return None


class GeminiChatAdapter:
    provider_name = "gemini"
    options_type = GeminiChatOptions

    def __init__(self, report: Optional[Reporter] = None) -> None:
        self._report = report or _ignore

    def endpoint(self, session: ChatSession) -> str:
        return f"models/{session.model}:generateContent"

    def build_payload(self, session: ChatSession) -> Dict[str, Any]:
        require_messages(session)
        if session.first_role() is not Role.USER:
            raise LogicError("The first message must be from the user role.")

        contents: List[Dict[str, Any]] = []
        last_role: Optional[str] = None
        for message in session.messages:
            role = "user" if message.role is Role.USER else "model"
            if role == last_role:
                self._report(
                    DIAG_CHAT_CONSECUTIVE_ROLES,
                    f"Consecutive messages with the same role ('{role}') detected. Gemini requires alternating roles.",
                    role=role,
                )
            contents.append({"role": role, "parts": [{"text": message.text}]})
            last_role = role

        payload: Dict[str, Any] = {"contents": contents}
        if session.system_instruction is not None:
            payload["systemInstruction"] = {"parts": [{"text": session.system_instruction}]}

        options = session.option_values()
        generation_config = {
            wire: options[name] for name, wire in GENERATION_CONFIG_FIELDS.items() if name in options
        }
        if generation_config:
            payload["generationConfig"] = generation_config
        if "safety_settings" in options:
            payload["safetySettings"] = options["safety_settings"]
        return payload

    def parse_response(self, raw: Any) -> ChatResponse:
        if not isinstance(raw, dict):
            raise ApiError(
                message="Unexpected Gemini response format.",
                provider=self.provider_name,
                category=ErrorCode.INVALID_RESPONSE,
                raw=raw,
            )
        parts = dig(raw, ("candidates", 0, "content", "parts")) or []
        text = "".join(
            p["text"]
            for p in parts
            if isinstance(p, dict) and isinstance(p.get("text"), str) and not p.get("thought")
        )
        return ChatResponse(
            text=text,
            finish_reason=dig(raw, ("candidates", 0, "finishReason")),
            usage=extract_usage(raw, GEMINI_USAGE_FIELDS),
            raw=raw,
        )


__all__ = ["GeminiChatAdapter", "GENERATION_CONFIG_FIELDS"]
