"""Configuration layer for provider clients.

Sources are merged in a predictable order:

1. Built-in defaults (:mod:`ai_access.config.defaults`)
2. Environment variables (``<PROVIDER>_API_KEY``, ``<PROVIDER>_BASE_URL``)
3. In-code overrides passed to :func:`get_provider_config`

There are no configuration files. ``None`` values in overrides are ignored.

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* get_api_key(provider: str) -> str | None
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from .defaults import PROVIDER_DEFAULT_BASE_URLS
from .env import is_placeholder, resolve_base_url, resolve_provider_key

SUPPORTED_PROVIDERS = tuple(PROVIDER_DEFAULT_BASE_URLS)


def _defaults_for(provider: str) -> Dict[str, Any]:
    return {"api_key": None, "base_url": PROVIDER_DEFAULT_BASE_URLS.get(provider)}


def _env_for(provider: str) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    key, _ = resolve_provider_key(provider)
    if key and not is_placeholder(key):
        data["api_key"] = key
    if base_url := resolve_base_url(provider):
        data["base_url"] = base_url
    return data


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged configuration for ``provider``.

    Parameters
    ----------
    provider: str
        Provider identifier (case-insensitive).
    overrides: dict | None
        Highest precedence values; ``None`` entries are skipped.

    Returns
    -------
    dict
        Always contains ``api_key`` and ``base_url`` (either may be ``None``
        for an unknown provider or missing credentials).
    """
    p = (provider or "").lower()
    cfg = _defaults_for(p)
    cfg.update(_env_for(p))
    if overrides:
        cfg.update({k: v for k, v in overrides.items() if v is not None})
    return cfg


def get_api_key(provider: str) -> Optional[str]:
    """Shortcut for ``get_provider_config(provider)["api_key"]``."""
    return get_provider_config(provider).get("api_key")


__all__ = ["SUPPORTED_PROVIDERS", "get_provider_config", "get_api_key"]
