"""Token usage helpers public surface."""

from .extraction import (
    ANTHROPIC_USAGE_FIELDS,
    CHAT_COMPLETIONS_USAGE_FIELDS,
    GEMINI_USAGE_FIELDS,
    OPENAI_RESPONSES_USAGE_FIELDS,
    CanonicalUsage,
    UsageFieldMap,
    dig,
    extract_usage,
)

__all__ = [
    "CanonicalUsage",
    "UsageFieldMap",
    "OPENAI_RESPONSES_USAGE_FIELDS",
    "CHAT_COMPLETIONS_USAGE_FIELDS",
    "ANTHROPIC_USAGE_FIELDS",
    "GEMINI_USAGE_FIELDS",
    "dig",
    "extract_usage",
]
