"""Pydantic DTOs for client, transport and chat options."""

from .transport_options import TransportOptions
from .client_options import AnthropicClientOptions, ClientOptions, OpenAIClientOptions
from .chat_options import (
    AnthropicChatOptions,
    ChatCompletionsOptions,
    ChatOptions,
    DeepSeekChatOptions,
    GeminiChatOptions,
    OpenAIChatOptions,
    XAIChatOptions,
)

__all__ = [
    "TransportOptions",
    "ClientOptions",
    "OpenAIClientOptions",
    "AnthropicClientOptions",
    "ChatOptions",
    "OpenAIChatOptions",
    "AnthropicChatOptions",
    "GeminiChatOptions",
    "ChatCompletionsOptions",
    "DeepSeekChatOptions",
    "XAIChatOptions",
]
