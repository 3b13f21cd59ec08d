"""Per-provider chat option models.

Every provider enumerates the generation options it supports as a pydantic
model with ``extra="forbid"``; the ``Chat`` state machine validates each
``set_options`` call against the adapter's model and merges the non-``None``
fields into the current values. Field names are the Python-side names; the
adapters translate them to vendor wire names.

Numeric bounds follow the ranges documented by each vendor.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ChatOptions(BaseModel):
    """Base class: strict, no unknown fields."""

    model_config = ConfigDict(extra="forbid")


class OpenAIChatOptions(ChatOptions):
    """Options of the OpenAI Responses API."""

    max_output_tokens: Optional[int] = Field(default=None, ge=1)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    truncation: Optional[Literal["auto", "disabled"]] = None
    metadata: Optional[Dict[str, str]] = None
    parallel_tool_calls: Optional[bool] = None
    previous_response_id: Optional[str] = None
    reasoning: Optional[Dict[str, Any]] = None
    store: Optional[bool] = None
    text: Optional[Dict[str, Any]] = None
    include: Optional[List[str]] = None
    tools: Optional[List[Dict[str, Any]]] = None


class AnthropicChatOptions(ChatOptions):
    """Options of the Anthropic Messages API."""

    max_tokens: Optional[int] = Field(default=None, ge=1)
    stop_sequences: Optional[List[str]] = None
    temperature: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    top_k: Optional[int] = Field(default=None, ge=0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class GeminiChatOptions(ChatOptions):
    """Options of the Gemini ``generateContent`` API."""

    max_output_tokens: Optional[int] = Field(default=None, ge=1)
    safety_settings: Optional[List[Dict[str, Any]]] = None
    stop_sequences: Optional[List[str]] = None
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_k: Optional[int] = Field(default=None, ge=0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class ChatCompletionsOptions(ChatOptions):
    """Options shared by Chat Completions style vendors."""

    max_output_tokens: Optional[int] = Field(default=None, ge=1)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    frequency_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    presence_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    stop: Optional[Union[str, List[str]]] = None
    response_format: Optional[Dict[str, Any]] = None
    tools: Optional[List[Dict[str, Any]]] = None
    tool_choice: Optional[Union[str, Dict[str, Any]]] = None


class DeepSeekChatOptions(ChatCompletionsOptions):
    """DeepSeek adds log probability reporting."""

    logprobs: Optional[bool] = None
    top_logprobs: Optional[int] = Field(default=None, ge=0, le=20)


class XAIChatOptions(ChatCompletionsOptions):
    """xAI adds deterministic seeding and reasoning effort."""

    seed: Optional[int] = None
    reasoning_effort: Optional[Literal["low", "high"]] = None


__all__ = [
    "ChatOptions",
    "OpenAIChatOptions",
    "AnthropicChatOptions",
    "GeminiChatOptions",
    "ChatCompletionsOptions",
    "DeepSeekChatOptions",
    "XAIChatOptions",
]
