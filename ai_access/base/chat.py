"""Chat session state machine.

A :class:`Chat` owns the ordered message history, the system instruction and
the provider options of one conversation. All vendor specifics are delegated
to a :class:`~ai_access.base.interfaces.ChatAdapter`; the chat itself holds
the rules shared by every provider:

* the history only grows through :meth:`Chat.add_message` or a successful
  :meth:`Chat.send_message`;
* a failed ``send_message`` restores the history to its pre-call state and
  re-raises the original exception unchanged;
* a successful exchange appends the model's reply (when non-empty).

A chat is owned by a single caller; concurrent use of one instance is not
supported.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ValidationError

from .errors import LogicError
from .interfaces import ChatAdapter
from .logging import LogContext, get_logger, normalized_log_event
from .models import ChatResponse, ChatSession, Message, Role


class Chat:
    """A conversation with one model of one provider.

    Parameters
    ----------
    client:
        Owning client; provides ``send_request``.
    adapter:
        Provider adapter building payloads and parsing responses.
    model:
        Model identifier.
    """

    def __init__(self, client: Any, adapter: ChatAdapter, model: str) -> None:
        if not model:
            raise LogicError("Model name must be a non-empty string.")
        self._client = client
        self._adapter = adapter
        self._model = model
        self._messages: List[Message] = []
        self._system_instruction: Optional[str] = None
        self._options: BaseModel = adapter.options_type()
        self._logger = get_logger(f"ai_access.{adapter.provider_name}")

    @property
    def model(self) -> str:
        return self._model

    @property
    def options(self) -> BaseModel:
        return self._options

    @property
    def session(self) -> ChatSession:
        """Immutable snapshot of the current state."""
        return ChatSession(
            model=self._model,
            messages=tuple(self._messages),
            system_instruction=self._system_instruction,
            options=self._options,
        )

    def add_message(self, text: str, role: Role = Role.USER) -> Message:
        """Append a message to the history without contacting the API."""
        if text is None:
            raise LogicError("Message text must not be None.")
        if not isinstance(role, Role):
            raise LogicError(f"Unsupported message role: {role!r}.")
        message = Message(text, role)
        self._messages.append(message)
        return message

    def set_system_instruction(self, instruction: str) -> "Chat":
        self._system_instruction = instruction
        return self

    def set_options(self, **options: Any) -> "Chat":
        """Merge provider options into the current values.

        Only non-``None`` values are applied; ``None`` never clears a
        previously set option.

        Raises:
            LogicError: For an option the provider does not support or an
                invalid value.
        """
        options_type = self._adapter.options_type
        try:
            update = options_type(**options)
        except ValidationError as exc:
            raise LogicError(f"Invalid {self._adapter.provider_name} chat options: {exc}") from exc
        merged: Dict[str, Any] = self._options.model_dump(exclude_none=True)
        merged.update(update.model_dump(exclude_none=True))
        self._options = options_type.model_validate(merged)
        return self

    def get_messages(self) -> List[Message]:
        """Return a copy of the history, oldest first."""
        return list(self._messages)

    def build_payload(self) -> Dict[str, Any]:
        """Return the vendor request body for the current state.

        No network call and no history mutation. Used by batch submission.
        """
        return self._adapter.build_payload(self.session)

    def send_message(self, text: Optional[str] = None) -> ChatResponse:
        """Send ``text`` (or continue from the history) and return the reply.

        Raises:
            LogicError: When the history is empty and no text is given.
            ApiError: On a provider error response.
            NetworkError: On a transport failure.
        """
        saved = list(self._messages)
        if text is not None:
            self.add_message(text, Role.USER)

        ctx = LogContext(provider=self._adapter.provider_name, model=self._model)
        try:
            session = self.session
            payload = self._adapter.build_payload(session)
            raw = self._client.send_request(self._adapter.endpoint(session), payload)
            response = self._adapter.parse_response(raw)
        except BaseException:
            self._messages = saved
            raise

        if response.text != "":
            self.add_message(response.text, Role.MODEL)
        normalized_log_event(
            self._logger,
            "chat.response",
            ctx,
            phase="finalize",
            level=logging.DEBUG,
            emitted=bool(response.text),
            tokens=response.usage,
            finish_reason=response.finish_reason,
        )
        return response


__all__ = ["Chat"]
