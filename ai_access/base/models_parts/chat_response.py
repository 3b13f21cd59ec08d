"""
ChatResponse DTO representing a normalized provider response.

Every adapter converts its vendor JSON into this shape. The ``raw`` field
keeps the decoded vendor payload for diagnostics but is excluded from
``to_dict`` so large object graphs are not logged unintentionally.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ChatResponse:
    """Provider-agnostic response of a chat exchange.

    Attributes:
        text: Concatenated text output; empty string when the model produced
            no text (e.g. only tool calls).
        finish_reason: Provider specific reason the model stopped generating.
        usage: Canonical token usage mapping (``input_tokens``,
            ``output_tokens``, ``reasoning_tokens`` plus provider extras) or
            ``None`` when the vendor did not report usage.
        raw: Decoded vendor response, for diagnostics only.
    """

    text: str
    finish_reason: Optional[str] = None
    usage: Optional[Dict[str, int]] = None
    raw: Any = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary excluding the raw payload."""
        return {
            "text": self.text,
            "finish_reason": self.finish_reason,
            "usage": dict(self.usage) if self.usage else None,
        }


__all__ = [
    "ChatResponse",
]
