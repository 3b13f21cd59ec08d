"""Client factory.

Purpose
-------
Create provider clients from a canonical name (``"openai"``, ``"anthropic"``,
``"gemini"``, ``"deepseek"``, ``"xai"``). Client modules are imported lazily
with ``importlib`` so importing the package does not import every provider.

Credential resolution
---------------------
An explicit ``api_key`` wins; otherwise the key is looked up through
:func:`ai_access.config.get_provider_config` (environment variables). A
missing key raises :class:`LogicError`. The factory performs no retries and
no network I/O.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Optional, Tuple, Type

from ..config import get_provider_config
from .client import BaseClient
from .errors import LogicError
from .http.transport import Transport
from .interfaces import DiagnosticSink


class UnknownProviderError(LogicError):
    """Raised when a provider name is not registered."""


class ClientFactory:
    """Create provider clients based on a canonical name."""

    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "openai": {"module": "ai_access.openai.client", "class": "OpenAIClient"},
        "anthropic": {"module": "ai_access.anthropic.client", "class": "AnthropicClient"},
        "gemini": {"module": "ai_access.gemini.client", "class": "GeminiClient"},
        "deepseek": {"module": "ai_access.deepseek.client", "class": "DeepSeekClient"},
        "xai": {"module": "ai_access.xai.client", "class": "XAIClient"},
    }

    @classmethod
    def client_class(cls, provider: str) -> Type[BaseClient]:
        """Return the client class registered for ``provider``.

        Raises
        ------
        UnknownProviderError
            If the provider is not registered.
        """
        name = (provider or "").lower().strip()
        spec = cls._PROVIDERS.get(name)
        if not spec:
            raise UnknownProviderError(f"Unknown provider '{provider}'")
        return getattr(import_module(spec["module"]), spec["class"])

    @classmethod
    def create(
        cls,
        provider: str,
        transport: Transport,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        diagnostics: Optional[DiagnosticSink] = None,
        **options: Any,
    ) -> BaseClient:
        """Create a configured client.

        Parameters
        ----------
        provider:
            Canonical provider name.
        transport:
            Transport used by the client for every request.
        api_key:
            Explicit credential; resolved from the environment when omitted.
        base_url:
            Explicit base URL; resolved from config (``<PROVIDER>_BASE_URL``
            or the built-in default) when omitted.
        diagnostics:
            Optional diagnostics sink.
        **options:
            Forwarded to ``client.set_options`` (timeouts, proxy and
            provider specific options).

        Raises
        ------
        UnknownProviderError
            Unknown provider name.
        LogicError
            No API key could be resolved, or invalid options.
        """
        klass = cls.client_class(provider)
        cfg = get_provider_config(provider, {"api_key": api_key, "base_url": base_url})
        if not cfg.get("api_key"):
            raise LogicError(
                f"No API key for provider '{provider}': pass api_key or set {provider.upper()}_API_KEY."
            )
        client = klass(cfg["api_key"], transport, diagnostics=diagnostics, base_url=cfg.get("base_url"))
        if options:
            client.set_options(**options)
        return client

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported canonical provider names in deterministic order."""
        return tuple(cls._PROVIDERS.keys())


def create_client(provider: str, transport: Transport, **kwargs: Any) -> BaseClient:
    """Shortcut for :meth:`ClientFactory.create`."""
    return ClientFactory.create(provider, transport, **kwargs)


__all__ = ["ClientFactory", "UnknownProviderError", "create_client"]
