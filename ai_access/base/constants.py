"""Stable diagnostic codes reported through the diagnostics channel.

Codes are part of the public contract: tests and callers may match on them.
"""
from __future__ import annotations

DIAG_EMBEDDING_COUNT_MISMATCH = "embedding.count_mismatch"
DIAG_EMBEDDING_ITEM_FAILED = "embedding.item_failed"
DIAG_EMBEDDING_DIMENSIONS_UNSUPPORTED = "embedding.dimensions_unsupported"
DIAG_BATCH_CANCEL_FAILED = "batch.cancel_failed"
DIAG_BATCH_METADATA_UNSUPPORTED = "batch.metadata_unsupported"
DIAG_BATCH_REQUEST_FAILED = "batch.request_failed"
DIAG_BATCH_RESULT_UNPARSEABLE = "batch.result_unparseable"
DIAG_BATCH_RESULTS_MISSING = "batch.results_missing"
DIAG_CHAT_CONSECUTIVE_ROLES = "chat.consecutive_roles"

__all__ = [
    "DIAG_EMBEDDING_COUNT_MISMATCH",
    "DIAG_EMBEDDING_ITEM_FAILED",
    "DIAG_EMBEDDING_DIMENSIONS_UNSUPPORTED",
    "DIAG_BATCH_CANCEL_FAILED",
    "DIAG_BATCH_METADATA_UNSUPPORTED",
    "DIAG_BATCH_REQUEST_FAILED",
    "DIAG_BATCH_RESULT_UNPARSEABLE",
    "DIAG_BATCH_RESULTS_MISSING",
    "DIAG_CHAT_CONSECUTIVE_ROLES",
]
