"""Shared building blocks for OpenAI-compatible Chat Completions vendors."""

from .chat_completions_adapter import CHAT_COMPLETIONS_ENDPOINT, ChatCompletionsAdapter, UnsupportedParams

__all__ = ["CHAT_COMPLETIONS_ENDPOINT", "ChatCompletionsAdapter", "UnsupportedParams"]
