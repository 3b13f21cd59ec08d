"""OpenAI provider."""

from .adapter import OpenAIResponsesAdapter
from .client import OpenAIClient

__all__ = ["OpenAIClient", "OpenAIResponsesAdapter"]
