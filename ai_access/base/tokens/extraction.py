"""Token usage extraction helpers.

Vendors report token accounting under different names and nesting levels.
This module converts them into one canonical mapping used by
:class:`ChatResponse` and structured logging::

    {"input_tokens": int, "output_tokens": int, "reasoning_tokens": int, ...}

Only keys with a concrete non-negative integer are kept; when the response
carries no usage at all the helpers return ``None``. Each adapter declares a
field map of ``canonical name -> path inside the decoded response``.

The helpers never raise: malformed values are dropped rather than allowed to
fail an otherwise successful exchange.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

CanonicalUsage = Dict[str, int]
UsageFieldMap = Mapping[str, Tuple[str, ...]]

# Responses API (OpenAI)
OPENAI_RESPONSES_USAGE_FIELDS: UsageFieldMap = {
    "input_tokens": ("usage", "input_tokens"),
    "output_tokens": ("usage", "output_tokens"),
    "reasoning_tokens": ("usage", "output_tokens_details", "reasoning_tokens"),
    "cached_tokens": ("usage", "input_tokens_details", "cached_tokens"),
    "total_tokens": ("usage", "total_tokens"),
}

# Chat Completions API (DeepSeek, xAI)
CHAT_COMPLETIONS_USAGE_FIELDS: UsageFieldMap = {
    "input_tokens": ("usage", "prompt_tokens"),
    "output_tokens": ("usage", "completion_tokens"),
    "reasoning_tokens": ("usage", "completion_tokens_details", "reasoning_tokens"),
    "cached_tokens": ("usage", "prompt_cache_hit_tokens"),
    "total_tokens": ("usage", "total_tokens"),
}

ANTHROPIC_USAGE_FIELDS: UsageFieldMap = {
    "input_tokens": ("usage", "input_tokens"),
    "output_tokens": ("usage", "output_tokens"),
    "cache_creation_input_tokens": ("usage", "cache_creation_input_tokens"),
    "cache_read_input_tokens": ("usage", "cache_read_input_tokens"),
}

GEMINI_USAGE_FIELDS: UsageFieldMap = {
    "input_tokens": ("usageMetadata", "promptTokenCount"),
    "output_tokens": ("usageMetadata", "candidatesTokenCount"),
    "reasoning_tokens": ("usageMetadata", "thoughtsTokenCount"),
    "total_tokens": ("usageMetadata", "totalTokenCount"),
}


def _coerce_int(value: Any) -> Optional[int]:
    """Coerce a value to a non-negative ``int`` or ``None``.

    Booleans are rejected even though they are ``int`` subclasses.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        iv = int(value)
    except (TypeError, ValueError):
        return None
    return iv if iv >= 0 else None


def dig(data: Any, path: Sequence[Any]) -> Any:
    """Follow ``path`` (mapping keys / list indexes) through decoded JSON.

    Returns ``None`` as soon as a step is missing or has the wrong type.
    """
    current = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return None
            current = current[step]
        else:
            if not isinstance(current, Mapping):
                return None
            current = current.get(step)
        if current is None:
            return None
    return current


def extract_usage(raw: Any, fields: UsageFieldMap) -> Optional[CanonicalUsage]:
    """Build the canonical usage mapping from a decoded vendor response.

    Args:
        raw: Decoded response body.
        fields: Canonical key to JSON path map for the vendor.

    Returns:
        Mapping containing only the counters that were present, or ``None``
        when none were.
    """
    usage: CanonicalUsage = {}
    for key, path in fields.items():
        value = _coerce_int(dig(raw, path))
        if value is not None:
            usage[key] = value
    return usage or None


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
