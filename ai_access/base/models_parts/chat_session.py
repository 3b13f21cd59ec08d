"""
ChatSession snapshot handed to provider adapters.

A :class:`ChatSession` is an immutable view of a chat's state at one point in
time: the model, the ordered history, the optional system instruction and the
provider options. Adapters receive a snapshot instead of the live ``Chat`` so
payload construction is a pure function that can be tested with synthetic
sessions.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from pydantic import BaseModel

from .message import Message, Role


@dataclass(frozen=True)
class ChatSession:
    """Immutable chat state.

    Attributes:
        model: Target model identifier.
        messages: Ordered history; insertion order is turn order.
        system_instruction: Instruction applied to the whole session.
        options: Provider specific options model (pydantic); unset fields are
            ``None``.
    """

    model: str
    messages: Tuple[Message, ...] = ()
    system_instruction: Optional[str] = None
    options: Optional[BaseModel] = field(default=None, compare=False)

    def option_values(self) -> dict:
        """Return the options that were explicitly set (``None`` values dropped)."""
        if self.options is None:
            return {}
        return self.options.model_dump(exclude_none=True)

    def first_role(self) -> Optional[Role]:
        return self.messages[0].role if self.messages else None


__all__ = ["ChatSession"]
