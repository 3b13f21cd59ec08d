"""Shared request execution for every provider client.

Purpose
-------
:class:`BaseClient` owns the credentials, the injected transport, the
client-wide transport options and the diagnostics sink. Its
:meth:`BaseClient.send_request` is the single place where requests are
assembled and responses are normalized, so every provider reports errors and
decodes bodies identically. Provider subclasses only declare their auth and
vendor headers, their base URL and their chat adapter.

Normalization rules
-------------------
- Endpoints starting with ``http://`` or ``https://`` are used verbatim;
  others are joined to the base URL.
- A mapping/list payload is sent as JSON; ``str``/``bytes`` payloads are sent
  verbatim; ``GET`` and ``DELETE`` never carry a body.
- Transport failures propagate as :class:`NetworkError` (no retries).
- Status >= 400 raises :class:`ApiError` with the HTTP status as ``code``.
- Status < 400: empty body -> ``None``; ``expect_json=False`` -> raw text;
  otherwise decoded JSON. A body that is not valid JSON is returned as text
  when the response declares a non-JSON content type, and raises
  :class:`ApiError` otherwise.

Logging
-------
``request.start`` / ``request.end`` / ``request.error`` events are emitted
through :func:`normalized_log_event`. Logged URLs never include the query
string and headers are never logged.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, Mapping, Optional, Type, Union

from pydantic import ValidationError

from ..config.defaults import DEFAULT_USER_AGENT
from .chat import Chat
from .diagnostics import DiagnosticsCollector
from .dto.client_options import ClientOptions
from .dto.transport_options import TransportOptions
from .errors import ApiError, ErrorCode, LogicError, NetworkError, classify_status, extract_error_message
from .http.transport import HeaderValue, Transport
from .interfaces import ChatAdapter, DiagnosticSink
from .logging import LogContext, get_logger, normalized_log_event
from .models import Diagnostic

_BODYLESS_METHODS = frozenset({"GET", "DELETE"})
_ABSOLUTE_PREFIXES = ("http://", "https://")

Payload = Union[Mapping[str, Any], list, str, bytes, None]


def _set_header(headers: Dict[str, HeaderValue], name: str, value: HeaderValue) -> None:
    """Set ``name`` replacing any existing header that differs only in case."""
    for existing in [k for k in headers if k.lower() == name.lower()]:
        del headers[existing]
    headers[name] = value


def _is_json_content_type(value: Optional[str]) -> bool:
    if not value:
        return False
    media = value.split(";", 1)[0].strip().lower()
    return media == "application/json" or media.endswith("+json")


def _strip_query(url: str) -> str:
    return url.split("?", 1)[0]


class BaseClient:
    """Base class of all provider clients.

    Subclasses set the class attributes and implement
    :meth:`_auth_headers` and :meth:`chat_adapter`.

    Parameters
    ----------
    api_key:
        Provider credential; must be non-empty.
    transport:
        HTTP transport used for every request. Required; no default transport
        is instantiated implicitly.
    diagnostics:
        Sink receiving non-fatal anomalies. Defaults to a fresh
        :class:`DiagnosticsCollector`.
    base_url:
        Optional replacement of the provider base URL.
    """

    provider_name: str = "base"
    label: str = "Provider"
    default_base_url: str = ""
    client_options_type: Type[ClientOptions] = ClientOptions

    def __init__(
        self,
        api_key: str,
        transport: Transport,
        *,
        diagnostics: Optional[DiagnosticSink] = None,
        base_url: Optional[str] = None,
    ) -> None:
        if not api_key:
            raise LogicError(f"{self.label} API key must be a non-empty string.")
        if transport is None:
            raise LogicError("A transport instance is required.")
        self._api_key = api_key
        self._transport = transport
        self._diagnostics: DiagnosticSink = diagnostics if diagnostics is not None else DiagnosticsCollector()
        self._base_url = self._normalize_base_url(base_url or self.default_base_url)
        self._transport_options = TransportOptions()
        self._settings: Dict[str, Any] = {}
        self._logger = get_logger(f"ai_access.{self.provider_name}")

    # ------------------------------------------------------------------ options
    @staticmethod
    def _normalize_base_url(url: str) -> str:
        return url.rstrip("/") + "/" if url else url

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def transport_options(self) -> TransportOptions:
        return self._transport_options

    @property
    def diagnostics(self) -> DiagnosticSink:
        return self._diagnostics

    def set_options(self, **options: Any) -> "BaseClient":
        """Merge client-wide options; ``None`` values leave settings unchanged.

        Accepts ``connect_timeout``, ``request_timeout``, ``proxy`` and
        ``base_url`` plus the provider specific fields of
        :attr:`client_options_type`.

        Raises:
            LogicError: On unknown option names or invalid values.
        """
        try:
            parsed = self.client_options_type(**options)
        except ValidationError as exc:
            raise LogicError(f"Invalid {self.label} client options: {exc}") from exc
        values = parsed.model_dump(exclude_none=True)
        self._transport_options = self._transport_options.merged(
            connect_timeout=values.pop("connect_timeout", None),
            request_timeout=values.pop("request_timeout", None),
            proxy=values.pop("proxy", None),
        )
        if "base_url" in values:
            self._base_url = self._normalize_base_url(values.pop("base_url"))
        self._settings.update(values)
        return self

    # --------------------------------------------------------------- chat entry
    def chat_adapter(self) -> ChatAdapter:
        """Return the adapter translating chat sessions for this provider."""
        raise NotImplementedError

    def create_chat(self, model: str) -> Chat:
        """Start a new chat session with ``model``."""
        return Chat(self, self.chat_adapter(), model)

    # -------------------------------------------------------------- diagnostics
    def report(self, code: str, message: str, **context: Any) -> None:
        """Deliver a diagnostic to the configured sink."""
        self._diagnostics.report(Diagnostic(code, message, provider=self.provider_name, context=context))

    # ------------------------------------------------------------------ request
    def _auth_headers(self) -> Dict[str, HeaderValue]:
        return {}

    def _vendor_headers(self) -> Dict[str, HeaderValue]:
        return {}

    def _build_url(self, endpoint: str) -> str:
        if endpoint.startswith(_ABSOLUTE_PREFIXES):
            return endpoint
        return self._base_url + endpoint.lstrip("/")

    def send_request(
        self,
        endpoint: str,
        payload: Payload = None,
        method: str = "POST",
        extra_headers: Optional[Mapping[str, HeaderValue]] = None,
        *,
        expect_json: bool = True,
    ) -> Any:
        """Execute one request and return the normalized response body.

        Raises:
            NetworkError: When the transport fails at connection level.
            ApiError: On HTTP status >= 400 or an undecodable JSON body.
        """
        method = method.upper()
        url = self._build_url(endpoint)
        headers: Dict[str, HeaderValue] = {}
        for name, value in self._auth_headers().items():
            _set_header(headers, name, value)
        _set_header(headers, "Accept", "application/json")
        _set_header(headers, "User-Agent", DEFAULT_USER_AGENT)

        body: Optional[Union[str, bytes]] = None
        if method not in _BODYLESS_METHODS and payload is not None:
            if isinstance(payload, (str, bytes)):
                body = payload
            else:
                body = json.dumps(payload, ensure_ascii=False)
                _set_header(headers, "Content-Type", "application/json")
        for name, value in self._vendor_headers().items():
            _set_header(headers, name, value)
        for name, value in (extra_headers or {}).items():
            _set_header(headers, name, value)

        ctx = LogContext(provider=self.provider_name, method=method, endpoint=_strip_query(url))
        normalized_log_event(self._logger, "request.start", ctx, phase="start", level=logging.DEBUG)
        started = time.perf_counter()
        try:
            response = self._transport.request(method, url, headers, body, self._transport_options)
        except NetworkError as exc:
            if exc.provider is None:
                exc.provider = self.provider_name
            normalized_log_event(
                self._logger,
                "request.error",
                ctx,
                phase="finalize",
                level=logging.ERROR,
                error_code=exc.category.value,
                emitted=False,
                error=exc.message,
            )
            raise
        duration_ms = round((time.perf_counter() - started) * 1000, 2)

        status = response.status_code
        if status >= 400:
            err = ApiError(
                message=extract_error_message(response.body, status, self.label),
                code=status,
                provider=self.provider_name,
                category=classify_status(status),
                raw=response.body,
            )
            normalized_log_event(
                self._logger,
                "request.error",
                ctx,
                phase="finalize",
                level=logging.ERROR,
                error_code=err.category.value,
                emitted=False,
                status=status,
                duration_ms=duration_ms,
            )
            raise err

        normalized_log_event(
            self._logger,
            "request.end",
            ctx,
            phase="finalize",
            emitted=True,
            status=status,
            duration_ms=duration_ms,
        )
        return self._decode_body(response.body, response.header("content-type"), status, expect_json)

    def _decode_body(self, text: str, content_type: Optional[str], status: int, expect_json: bool) -> Any:
        if not text:
            return None
        if not expect_json:
            return text
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            if content_type and not _is_json_content_type(content_type):
                return text
            raise ApiError(
                message=f"Invalid JSON in {self.label} API response: {exc}",
                code=status,
                provider=self.provider_name,
                category=ErrorCode.INVALID_RESPONSE,
                raw=text,
            ) from exc


__all__ = ["BaseClient", "Payload"]
