"""Gemini provider."""

from .adapter import GeminiChatAdapter
from .client import GeminiClient

__all__ = ["GeminiChatAdapter", "GeminiClient"]
