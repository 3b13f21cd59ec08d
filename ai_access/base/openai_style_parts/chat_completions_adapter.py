"""Chat Completions adapter shared by OpenAI-compatible vendors.

DeepSeek and xAI expose the same ``POST chat/completions`` contract and only
differ in the name of the output token limit and in which parameters a given
model rejects. Both are expressed as constructor arguments rather than
subclasses:

``token_param``
    Wire name receiving the ``max_output_tokens`` option
    (``max_tokens`` or ``max_completion_tokens``).
``unsupported_params``
    Callable returning the parameter names to drop for a model; applied after
    the options are merged into the payload.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Optional, Type

from ..dto.chat_options import ChatCompletionsOptions
from ..errors import ApiError, ErrorCode
from ..models import ChatResponse, ChatSession
from ..tokens import CHAT_COMPLETIONS_USAGE_FIELDS, dig, extract_usage
from ..utils import require_messages, role_messages

UnsupportedParams = Callable[[str], Iterable[str]]

CHAT_COMPLETIONS_ENDPOINT = "chat/completions"


def _nothing_unsupported(model: str) -> Iterable[str]:
    return ()


class ChatCompletionsAdapter:
    """Build ``chat/completions`` payloads and parse their responses."""

    def __init__(
        self,
        provider_name: str,
        options_type: Type[ChatCompletionsOptions],
        *,
        token_param: str = "max_tokens",
        unsupported_params: Optional[UnsupportedParams] = None,
    ) -> None:
        self.provider_name = provider_name
        self.options_type = options_type
        self.token_param = token_param
        self._unsupported_params = unsupported_params or _nothing_unsupported

    def endpoint(self, session: ChatSession) -> str:
        return CHAT_COMPLETIONS_ENDPOINT

    def build_payload(self, session: ChatSession) -> Dict[str, Any]:
        require_messages(session)
        messages = role_messages(session)
        if session.system_instruction is not None:
            messages.insert(0, {"role": "system", "content": session.system_instruction})

        payload: Dict[str, Any] = {"model": session.model, "messages": messages}
        options = session.option_values()
        if "max_output_tokens" in options:
            options[self.token_param] = options.pop("max_output_tokens")
        payload.update(options)
        for name in self._unsupported_params(session.model):
            payload.pop(name, None)
        return payload

    def parse_response(self, raw: Any) -> ChatResponse:
        if not isinstance(raw, dict):
            raise ApiError(
                message=f"Unexpected {self.provider_name} response format.",
                provider=self.provider_name,
                category=ErrorCode.INVALID_RESPONSE,
                raw=raw,
            )
        content = dig(raw, ("choices", 0, "message", "content"))
        return ChatResponse(
            text=content if isinstance(content, str) else "",
            finish_reason=dig(raw, ("choices", 0, "finish_reason")),
            usage=extract_usage(raw, CHAT_COMPLETIONS_USAGE_FIELDS),
            raw=raw,
        )


__all__ = ["ChatCompletionsAdapter", "CHAT_COMPLETIONS_ENDPOINT", "UnsupportedParams"]
