"""Message translation helpers shared across providers.

Helpers here operate on :class:`ChatSession` snapshots and decoded vendor
JSON only; they never mutate their inputs.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from ..errors import LogicError
from ..models import ChatSession, Role

EMPTY_HISTORY_ERROR = "Cannot send request with empty message history."


def require_messages(session: ChatSession) -> None:
    """Raise ``LogicError`` when the session has no messages."""
    if not session.messages:
        raise LogicError(EMPTY_HISTORY_ERROR)


def role_messages(session: ChatSession, model_role: str = "assistant") -> List[Dict[str, str]]:
    """Return ``[{"role", "content"}]`` entries for the session history.

    ``Role.USER`` maps to ``"user"`` and ``Role.MODEL`` to ``model_role``.
    """
    return [
        {"role": "user" if m.role is Role.USER else model_role, "content": m.text}
        for m in session.messages
    ]


def text_parts(items: Optional[Iterable[Any]], type_key: str = "type", wanted: Optional[str] = None) -> str:
    """Concatenate the ``text`` of content blocks.

    When ``wanted`` is given only blocks whose ``type_key`` equals it are
    used. Non-mapping entries and blocks without string text are skipped.
    """
    chunks: List[str] = []
    for item in items or ():
        if not isinstance(item, dict):
            continue
        if wanted is not None and item.get(type_key) != wanted:
            continue
        text = item.get("text")
        if isinstance(text, str):
            chunks.append(text)
    return "".join(chunks)


__all__ = ["EMPTY_HISTORY_ERROR", "require_messages", "role_messages", "text_parts"]
