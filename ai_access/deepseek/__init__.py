"""DeepSeek provider."""

from .client import DeepSeekClient

__all__ = ["DeepSeekClient"]
