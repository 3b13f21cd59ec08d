"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `ai_access.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .access_error import AccessError, ApiError, LogicError, NetworkError
from .classification import classify_status, extract_error_message

__all__ = [
    "ErrorCode",
    "AccessError",
    "LogicError",
    "ApiError",
    "NetworkError",
    "classify_status",
    "extract_error_message",
]
