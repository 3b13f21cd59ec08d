"""Deterministic in-memory transport for tests.

:class:`FakeTransport` implements the :class:`~ai_access.base.http.Transport`
contract without any network access: it replays queued responses (or
raises queued exceptions) in FIFO order and records every request it
receives.

Example::

    transport = FakeTransport()
    transport.add_json({"output": []})
    client = OpenAIClient("sk-test", transport)
"""

from __future__ import annotations

import json
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, List, Mapping, Optional, Union

from .base.dto.transport_options import TransportOptions
from .base.http.transport import HeaderValue, HttpResponse


@dataclass
class RecordedRequest:
    """One request received by :class:`FakeTransport`."""

    method: str
    url: str
    headers: Mapping[str, HeaderValue]
    body: Optional[Union[str, bytes]]
    options: TransportOptions
    extra: dict = field(default_factory=dict)

    def header(self, name: str) -> Optional[HeaderValue]:
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                return value
        return None

    def json(self) -> Any:
        if self.body is None:
            return None
        return json.loads(self.body)

    def text(self) -> str:
        if self.body is None:
            return ""
        return self.body.decode("utf-8") if isinstance(self.body, bytes) else self.body


class FakeTransport:
    """Replay queued responses and record requests."""

    def __init__(self) -> None:
        self._queue: Deque[Union[HttpResponse, BaseException]] = deque()
        self.requests: List[RecordedRequest] = []

    def add(self, item: Union[HttpResponse, BaseException]) -> "FakeTransport":
        self._queue.append(item)
        return self

    def add_json(self, data: Any, status: int = 200) -> "FakeTransport":
        return self.add(
            HttpResponse(status, json.dumps(data), {"content-type": "application/json"})
        )

    def add_text(self, text: str, status: int = 200, content_type: Optional[str] = None) -> "FakeTransport":
        headers = {"content-type": content_type} if content_type else {}
        return self.add(HttpResponse(status, text, headers))

    def add_error(self, exc: BaseException) -> "FakeTransport":
        return self.add(exc)

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]

    @property
    def pending(self) -> int:
        return len(self._queue)

    def request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, HeaderValue],
        body: Optional[Union[str, bytes]],
        options: TransportOptions,
    ) -> HttpResponse:
        self.requests.append(RecordedRequest(method, url, dict(headers), body, options))
        if not self._queue:
            raise AssertionError(f"FakeTransport has no queued response for {method} {url}")
        item = self._queue.popleft()
        if isinstance(item, BaseException):
            raise item
        return item


__all__ = ["FakeTransport", "RecordedRequest"]
