"""ChatAdapter Protocol (single-class module).

The vendor-specific half of a chat exchange. ``Chat`` owns the history and
the rollback logic; the adapter only translates a :class:`ChatSession`
snapshot into a request and a decoded body into a :class:`ChatResponse`.
"""

from __future__ import annotations

from typing import Any, Dict, Protocol, Type, runtime_checkable

from pydantic import BaseModel

from ..models import ChatResponse, ChatSession


@runtime_checkable
class ChatAdapter(Protocol):
    """Per-provider payload builder and response parser.

    ``build_payload`` and ``parse_response`` must be free of side effects on
    the session. ``build_payload`` raises ``LogicError`` on misuse (e.g. an
    empty history).
    """

    provider_name: str
    options_type: Type[BaseModel]

    def endpoint(self, session: ChatSession) -> str:  # pragma: no cover - interface
        """Return the endpoint (relative to the base URL) for the session."""
        ...

    def build_payload(self, session: ChatSession) -> Dict[str, Any]:  # pragma: no cover - interface
        """Return the vendor request body for the session."""
        ...

    def parse_response(self, raw: Any) -> ChatResponse:  # pragma: no cover - interface
        """Normalize a decoded vendor response."""
        ...
