"""
Batch job status enumeration.

Every vendor status vocabulary is mapped into this closed set. ``OTHER``
stands for a status the client does not recognize; callers should treat it as
still pending.
"""
from __future__ import annotations

from enum import Enum


class BatchStatus(str, Enum):
    """Status of a remote batch job."""

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"
    OTHER = "other"


__all__ = ["BatchStatus"]
