"""
Exception taxonomy shared by every provider client.

Three concrete failures derive from the :class:`AccessError` marker so callers
may catch broadly (``except AccessError``) or narrowly:

* :class:`LogicError` - the caller misused the API (empty history, duplicate
  batch id, dimension mismatch). Indicates a programming error.
* :class:`ApiError` - the provider answered with HTTP >= 400 or with a body
  that could not be decoded. ``code`` carries the HTTP status.
* :class:`NetworkError` - the transport could not complete the exchange
  (DNS, TLS, timeout, reset).

None of them is retried inside the library.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .error_code import ErrorCode


class AccessError(Exception):
    """Marker base class for every exception raised by ``ai_access``."""


class LogicError(AccessError):
    """Invalid method arguments or invalid library state."""


@dataclass(eq=False)
class ApiError(AccessError):
    """The provider API returned an error.

    Attributes:
        message: Best-effort human readable message extracted from the
            vendor error envelope.
        code: HTTP status code of the failed exchange (0 when unknown).
        provider: Provider key where the error originated (e.g. ``"openai"``).
        category: Normalized :class:`ErrorCode` derived from ``code``.
        raw: Raw response body of the failed exchange.
    """

    message: str
    code: int = 0
    provider: Optional[str] = None
    category: ErrorCode = ErrorCode.UNKNOWN
    raw: Any = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class NetworkError(AccessError):
    """A network error occurred while communicating with the API.

    Attributes:
        message: Transport supplied description of the failure.
        provider: Provider key when known; transports leave it unset and the
            client fills it in.
        category: ``ErrorCode.TIMEOUT`` for deadline failures, otherwise
            ``ErrorCode.TRANSIENT``.
        raw: Original transport exception.
    """

    message: str
    provider: Optional[str] = None
    category: ErrorCode = ErrorCode.TRANSIENT
    raw: Optional[Exception] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


__all__ = ["AccessError", "LogicError", "ApiError", "NetworkError"]
