"""Transport contract consumed by provider clients.

The raw HTTP exchange (connection handling, TLS, proxies, timeouts) lives
outside the client layer. Clients receive a :class:`Transport` explicitly at
construction time, which lets tests substitute a deterministic fake.

Contract
--------
``request(method, url, headers, body, options) -> HttpResponse``

* ``headers`` values may be a string or a list of strings (repeated header).
* ``body`` is ``None`` for requests without a body.
* Connection-level failures (DNS, TLS, timeout, reset) must be raised as
  :class:`~ai_access.base.errors.NetworkError`. HTTP error statuses are *not*
  exceptions at this level; they are returned as regular responses.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Protocol, Union, runtime_checkable

from ..dto.transport_options import TransportOptions

HeaderValue = Union[str, List[str]]


@dataclass(frozen=True)
class HttpResponse:
    """Result of one HTTP exchange.

    Attributes:
        status_code: HTTP status code.
        body: Decoded response body text.
        headers: Response headers; names are expected in lowercase.
    """

    status_code: int
    body: str = ""
    headers: Mapping[str, HeaderValue] = field(default_factory=dict)

    def header(self, name: str) -> Optional[str]:
        """Return the first value of header ``name`` (case-insensitive)."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() != wanted:
                continue
            if isinstance(value, list):
                return value[0] if value else None
            return value
        return None


@runtime_checkable
class Transport(Protocol):
    """Performs HTTP requests on behalf of the clients."""

    def request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, HeaderValue],
        body: Optional[Union[str, bytes]],
        options: TransportOptions,
    ) -> HttpResponse:
        """Send one request and return the response (any status)."""
        ...


__all__ = ["HeaderValue", "HttpResponse", "Transport"]
