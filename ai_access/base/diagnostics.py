"""Default diagnostics channel.

Non-fatal anomalies (unsupported option ignored, skipped batch result,
count mismatch in an embeddings response, ...) are reported as
:class:`~ai_access.base.models.Diagnostic` records instead of being printed or
silently dropped. :class:`DiagnosticsCollector` keeps every record so the
caller can inspect them and logs each one as a structured ``WARNING`` event.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .logging import LogContext, get_logger, log_event
from .models import Diagnostic


class DiagnosticsCollector:
    """Collects diagnostics and mirrors them to the ``ai_access`` logger."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._records: List[Diagnostic] = []
        self._logger = logger or get_logger("ai_access.diagnostics")

    def report(self, diagnostic: Diagnostic) -> None:
        self._records.append(diagnostic)
        log_event(
            self._logger,
            "diagnostic",
            LogContext(provider=diagnostic.provider or "unknown"),
            level=logging.WARNING,
            code=diagnostic.code,
            message=diagnostic.message,
            context=diagnostic.context or None,
        )

    @property
    def records(self) -> List[Diagnostic]:
        """Return a copy of the collected diagnostics, oldest first."""
        return list(self._records)

    def codes(self) -> List[str]:
        return [d.code for d in self._records]

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)


__all__ = ["DiagnosticsCollector"]
