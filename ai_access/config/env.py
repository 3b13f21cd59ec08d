"""ai_access.config.env
====================

Environment variable mapping for provider credentials and endpoints.

Purpose
-------
- Single source of truth for provider -> environment variable names.
- Small lookup helpers used by :func:`ai_access.config.get_provider_config`.

Failure Modes
-------------
Helpers return ``None`` for unknown providers or unset variables; they never
raise. Callers decide what a missing value means.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Canonical provider -> API key variable
ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "deepseek": "DEEPSEEK_API_KEY",
    "xai": "XAI_API_KEY",
}

# Provider -> ordered acceptable names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if ``val`` looks like a placeholder rather than a real key.

    Case-insensitive: contains 'placeholder', 'changeme' or 'example', or
    starts with 'test_'.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("test_")


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable API key variable names for ``provider``, canonical first."""
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, variable_name)`` of the first non-empty key variable.

    ``(None, None)`` when nothing is set.
    """
    for name in get_env_var_candidates(provider):
        if val := os.environ.get(name):
            return val, name
    return None, None


def resolve_base_url(provider: str) -> Optional[str]:
    """Return the ``<PROVIDER>_BASE_URL`` override, if set and non-blank."""
    value = os.environ.get(f"{(provider or '').upper()}_BASE_URL")
    return value.strip() if value and value.strip() else None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_candidates",
    "resolve_provider_key",
    "resolve_base_url",
]
