"""Unified error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``ai_access.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.access_error import AccessError, ApiError, LogicError, NetworkError
from .errors_parts.classification import classify_status, extract_error_message

__all__ = [
    "ErrorCode",
    "AccessError",
    "LogicError",
    "ApiError",
    "NetworkError",
    "classify_status",
    "extract_error_message",
]
