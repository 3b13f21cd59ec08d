"""
Error classification helpers.

Maps HTTP status codes to normalized :class:`ErrorCode` values and extracts a
human readable message from the various vendor error envelopes. Both helpers
are used by ``BaseClient.send_request`` only, which keeps error normalization
in a single place regardless of the provider that issued the request.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

from .error_code import ErrorCode


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
    529: ErrorCode.UNAVAILABLE,
}


def classify_status(status: int) -> ErrorCode:
    """Classify an HTTP status code into a normalized :class:`ErrorCode`.

    Unmapped 5xx codes fall back to ``SERVER_ERROR``; anything else is
    ``UNKNOWN``.
    """
    code = _HTTP_STATUS_MAP.get(status)
    if code is not None:
        return code
    if 500 <= status < 600:
        return ErrorCode.SERVER_ERROR
    return ErrorCode.UNKNOWN


def _message_from_envelope(data: Any) -> Optional[str]:
    """Return the message of a decoded error envelope, trying known shapes in order.

    Supported shapes (priority order):
    - ``{"error": {"message": "..."}}`` (OpenAI, Anthropic, Gemini, xAI)
    - ``{"error": "..."}``
    - ``{"detail": "..."}`` or structured ``detail`` (FastAPI style gateways)
    - ``{"msg": "..."}``
    - ``{"message": "..."}``
    - a bare JSON string
    """
    if isinstance(data, str):
        return data or None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    if isinstance(error, str) and error:
        return error
    detail = data.get("detail")
    if isinstance(detail, str) and detail:
        return detail
    if isinstance(detail, (dict, list)) and detail:
        return json.dumps(detail, ensure_ascii=False)
    for key in ("msg", "message"):
        value = data.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def extract_error_message(body: str, status: int, label: str) -> str:
    """Extract a best-effort error message from an HTTP error response body.

    Parameters:
        body: Raw response body text (may be empty or non-JSON).
        status: HTTP status code, used for the generic fallback.
        label: Human readable provider label (e.g. ``"OpenAI"``).

    Returns:
        The envelope message when one is found, else the raw body, else
        ``"<label> API error (HTTP <status>)"``.
    """
    if body:
        try:
            decoded = json.loads(body)
        except ValueError:
            decoded = None
        message = _message_from_envelope(decoded)
        if message:
            return message
        if body.strip():
            return body
    return f"{label} API error (HTTP {status})"


__all__ = [
    "classify_status",
    "extract_error_message",
    "_HTTP_STATUS_MAP",
]
