"""
Diagnostic record for non-fatal anomalies.

Operations that succeed with caveats (embedding count mismatch, option
ignored for a model, cancellation of an already finished batch) report a
:class:`Diagnostic` to the client's diagnostics sink instead of raising, so
partial results stay available to the caller.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal anomaly observed during an operation.

    Attributes:
        code: Stable machine readable identifier (e.g. ``"embedding.count_mismatch"``).
        message: Human readable description.
        provider: Provider key where the anomaly was observed.
        context: Additional JSON-serializable details.
    """

    code: str
    message: str
    provider: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "provider": self.provider,
            "context": dict(self.context),
        }


__all__ = ["Diagnostic"]
