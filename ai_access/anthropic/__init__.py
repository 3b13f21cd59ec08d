"""Anthropic provider."""

from .adapter import AnthropicMessagesAdapter
from .client import AnthropicClient

__all__ = ["AnthropicClient", "AnthropicMessagesAdapter"]
