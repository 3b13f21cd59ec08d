"""httpx-based implementation of the :class:`Transport` contract.

Purpose:
    Provide the default production transport. One ``httpx.Client`` is kept per
    proxy setting and reused across requests to avoid per-call connection
    setup; timeouts are applied per request from :class:`TransportOptions`,
    and ``request_timeout`` is enforced as a deadline for the whole exchange.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Failure mapping:
    - ``httpx.TimeoutException`` -> ``NetworkError`` (``ErrorCode.TIMEOUT``)
    - any other ``httpx.TransportError`` -> ``NetworkError``
      (``ErrorCode.TRANSIENT``)

Lifecycle:
    Call :meth:`HttpxTransport.close` (or use the transport as a context
    manager) to release pooled connections.
"""

from __future__ import annotations

import threading
import time
from typing import Callable, Dict, List, Mapping, Optional, Tuple, Union

import httpx

from ..dto.transport_options import TransportOptions
from ..errors import ErrorCode, NetworkError
from .transport import HeaderValue, HttpResponse


class HttpxTransport:
    """Synchronous transport backed by pooled ``httpx.Client`` instances."""

    def __init__(self, *, verify: bool = True, clock: Callable[[], float] = time.monotonic) -> None:
        self._verify = verify
        self._clock = clock
        self._clients: Dict[Optional[str], httpx.Client] = {}
        self._lock = threading.RLock()

    def _client_for(self, proxy: Optional[str]) -> httpx.Client:
        """Return the pooled client for ``proxy`` (``None`` = direct)."""
        client = self._clients.get(proxy)
        if client is not None:
            return client
        with self._lock:
            client = self._clients.get(proxy)
            if client is None:
                client = httpx.Client(proxy=proxy, verify=self._verify, follow_redirects=True)
                self._clients[proxy] = client
            return client

    @staticmethod
    def _flatten_headers(headers: Mapping[str, HeaderValue]) -> List[Tuple[str, str]]:
        items: List[Tuple[str, str]] = []
        for name, value in headers.items():
            for v in value if isinstance(value, list) else [value]:
                items.append((name, v))
        return items

    @staticmethod
    def _collect_headers(headers: httpx.Headers) -> Dict[str, HeaderValue]:
        collected: Dict[str, HeaderValue] = {}
        for name, value in headers.multi_items():
            key = name.lower()
            existing = collected.get(key)
            if existing is None:
                collected[key] = value
            elif isinstance(existing, list):
                existing.append(value)
            else:
                collected[key] = [existing, value]
        return collected

    def _check_deadline(self, resp: httpx.Response, deadline: float, budget: float) -> None:
        if self._clock() > deadline:
            raise httpx.ReadTimeout(f"Total request timeout of {budget}s exceeded", request=resp.request)

    def _read_body(self, resp: httpx.Response, deadline: float, budget: float) -> bytes:
        self._check_deadline(resp, deadline, budget)
        chunks: List[bytes] = []
        for chunk in resp.iter_bytes():
            chunks.append(chunk)
            self._check_deadline(resp, deadline, budget)
        return b"".join(chunks)

    def request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, HeaderValue],
        body: Optional[Union[str, bytes]],
        options: TransportOptions,
    ) -> HttpResponse:
        """Send one request; see :class:`~ai_access.base.http.transport.Transport`.

        ``request_timeout`` bounds the whole exchange: every network wait is
        limited by it and the deadline is checked again after the response
        head and after each body chunk.
        """
        budget = max(options.connect_timeout, options.request_timeout)
        deadline = self._clock() + budget
        timeout = httpx.Timeout(budget, connect=options.connect_timeout)
        client = self._client_for(options.proxy)
        try:
            request = client.build_request(
                method,
                url,
                headers=self._flatten_headers(headers),
                content=body,
                timeout=timeout,
            )
            resp = client.send(request, stream=True)
            try:
                content = self._read_body(resp, deadline, budget)
            finally:
                resp.close()
        except httpx.TimeoutException as exc:
            raise NetworkError(f"HTTP request timed out: {exc}", category=ErrorCode.TIMEOUT, raw=exc) from exc
        except httpx.TransportError as exc:
            raise NetworkError(f"HTTP request failed: {exc}", category=ErrorCode.TRANSIENT, raw=exc) from exc
        return HttpResponse(
            status_code=resp.status_code,
            body=content.decode(resp.encoding or "utf-8", errors="replace"),
            headers=self._collect_headers(resp.headers),
        )

    def close(self) -> None:
        """Close and forget all pooled clients."""
        with self._lock:
            for c in self._clients.values():
                c.close()
            self._clients.clear()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["HttpxTransport"]
