"""
Normalized failure categories.

`ErrorCode` is attached to :class:`ApiError` and :class:`NetworkError` so
callers can branch on a stable category (rate limit, auth, timeout) without
memorizing every vendor's status code conventions. Values are lowercase
snake_case and form part of the structured logging contract.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    INVALID_RESPONSE = "invalid_response"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
