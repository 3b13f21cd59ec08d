"""xAI (Grok) provider."""

from .client import XAIClient

__all__ = ["XAIClient"]
