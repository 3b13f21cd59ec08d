"""DiagnosticSink Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import Diagnostic


@runtime_checkable
class DiagnosticSink(Protocol):
    """Receives non-fatal anomalies (warnings) raised while using a client.

    Implementations must not raise; a diagnostic never interrupts the
    operation that produced it.
    """

    def report(self, diagnostic: Diagnostic) -> None:  # pragma: no cover - interface
        ...
