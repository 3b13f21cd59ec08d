"""Structured logging context object.

:class:`LogContext` carries the fields shared by every event a client emits
for one exchange (provider, model, HTTP method, endpoint). ``to_dict`` merges
the ``extra`` mapping and prunes ``None`` values.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for client logging events."""

    provider: Optional[str] = None
    model: Optional[str] = None
    method: Optional[str] = None
    endpoint: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
