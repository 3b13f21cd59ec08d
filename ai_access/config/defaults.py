"""ai_access.config.defaults
=========================

Central place for the small, stable default values used across the
ai_access package: vendor base URLs, API versions, timeouts and the
User-Agent string.

Only plain constants live here. This module imports nothing from the rest of
the package so it can be used from any layer without circular imports.
"""

from __future__ import annotations

# ---- Library identity ----
LIBRARY_VERSION = "0.1.0"
DEFAULT_USER_AGENT = f"ai-access-python/{LIBRARY_VERSION}"

# ---- Transport ----
# Seconds allowed for establishing the connection.
DEFAULT_CONNECT_TIMEOUT = 10.0
# Seconds allowed for the whole request.
DEFAULT_REQUEST_TIMEOUT = 60.0

# ---- Provider base URLs (trailing slash required for relative joins) ----
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1/"
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com/"
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/"
DEEPSEEK_DEFAULT_BASE_URL = "https://api.deepseek.com/"
XAI_DEFAULT_BASE_URL = "https://api.x.ai/v1/"

# ---- Provider-specific ----
ANTHROPIC_DEFAULT_API_VERSION = "2023-06-01"
# Used when a chat does not set max_output_tokens; the Messages API requires it.
ANTHROPIC_DEFAULT_MAX_TOKENS = 1024

# OpenAI batch jobs
OPENAI_BATCH_ENDPOINT = "/v1/responses"
OPENAI_BATCH_COMPLETION_WINDOW = "24h"

PROVIDER_DEFAULT_BASE_URLS = {
    "openai": OPENAI_DEFAULT_BASE_URL,
    "anthropic": ANTHROPIC_DEFAULT_BASE_URL,
    "gemini": GEMINI_DEFAULT_BASE_URL,
    "deepseek": DEEPSEEK_DEFAULT_BASE_URL,
    "xai": XAI_DEFAULT_BASE_URL,
}

__all__ = [
    "LIBRARY_VERSION",
    "DEFAULT_USER_AGENT",
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_REQUEST_TIMEOUT",
    "OPENAI_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_BASE_URL",
    "GEMINI_DEFAULT_BASE_URL",
    "DEEPSEEK_DEFAULT_BASE_URL",
    "XAI_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_API_VERSION",
    "ANTHROPIC_DEFAULT_MAX_TOKENS",
    "OPENAI_BATCH_ENDPOINT",
    "OPENAI_BATCH_COMPLETION_WINDOW",
    "PROVIDER_DEFAULT_BASE_URLS",
]
